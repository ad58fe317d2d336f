"""Parameter configuration for database drivers."""

from typing import Final, Optional

from sqlglot.dialects.dialect import Dialect

from sqlexpand.exceptions import ImproperConfigurationError
from sqlexpand.parameters.rebind import Rebinder
from sqlexpand.parameters.types import ParameterStyle

__all__ = ("DIALECT_PARAMETER_STYLES", "PARAMSTYLE_PARAMETER_STYLES", "ParameterStyleConfig")

# keyed by lower-cased sqlglot dialect class name
DIALECT_PARAMETER_STYLES: "Final[dict[str, ParameterStyle]]" = {
    "postgres": ParameterStyle.NUMERIC,
    "redshift": ParameterStyle.NUMERIC,
    "materialize": ParameterStyle.NUMERIC,
    "risingwave": ParameterStyle.NUMERIC,
    "mysql": ParameterStyle.QMARK,
    "doris": ParameterStyle.QMARK,
    "starrocks": ParameterStyle.QMARK,
    "sqlite": ParameterStyle.QMARK,
    "duckdb": ParameterStyle.QMARK,
    "oracle": ParameterStyle.NAMED_COLON,
    "tsql": ParameterStyle.NAMED_AT,
}

# PEP 249 ``paramstyle`` values
PARAMSTYLE_PARAMETER_STYLES: "Final[dict[str, ParameterStyle]]" = {
    "qmark": ParameterStyle.QMARK,
    "numeric": ParameterStyle.POSITIONAL_COLON,
    "named": ParameterStyle.NAMED_COLON,
    "format": ParameterStyle.POSITIONAL_PYFORMAT,
    "pyformat": ParameterStyle.POSITIONAL_PYFORMAT,
}


class ParameterStyleConfig:
    """Declarative configuration for a driver's parameter handling."""

    __slots__ = ("default_parameter_style", "dialect", "supported_parameter_styles")

    def __init__(
        self,
        default_parameter_style: ParameterStyle = ParameterStyle.QMARK,
        supported_parameter_styles: "Optional[set[ParameterStyle]]" = None,
        dialect: Optional[str] = None,
    ) -> None:
        """Initialize driver parameter configuration.

        Args:
            default_parameter_style: The style ``?`` markers are rebound to
            supported_parameter_styles: Set of parameter styles the driver accepts
            dialect: Optional sqlglot dialect name this configuration was derived from
        """
        self.default_parameter_style = default_parameter_style
        self.supported_parameter_styles = supported_parameter_styles or {default_parameter_style}
        self.dialect = dialect

    @classmethod
    def from_dialect(cls, dialect: str) -> "ParameterStyleConfig":
        """Build a configuration from a sqlglot dialect name.

        Args:
            dialect: Dialect name as understood by sqlglot, e.g. ``"postgres"`` or ``"tsql"``.

        Raises:
            ImproperConfigurationError: If sqlglot does not know the dialect.

        Returns:
            Configuration using the dialect's customary placeholder style.
        """
        try:
            resolved = Dialect.get_or_raise(dialect)
        except ValueError as e:
            msg = f"Unknown SQL dialect {dialect!r}"
            raise ImproperConfigurationError(msg) from e
        dialect_type = resolved if isinstance(resolved, type) else type(resolved)
        name = dialect_type.__name__.lower()
        return cls(DIALECT_PARAMETER_STYLES.get(name, ParameterStyle.QMARK), dialect=name)

    @classmethod
    def from_paramstyle(cls, paramstyle: str) -> "ParameterStyleConfig":
        """Build a configuration from a DB-API module's ``paramstyle`` attribute.

        Raises:
            ImproperConfigurationError: If the paramstyle is not defined by PEP 249.
        """
        style = PARAMSTYLE_PARAMETER_STYLES.get(paramstyle)
        if style is None:
            msg = f"Unknown DB-API paramstyle {paramstyle!r}"
            raise ImproperConfigurationError(msg)
        return cls(style)

    def create_rebinder(self) -> Rebinder:
        return Rebinder(self.default_parameter_style)

    def replace(self, **kwargs: "object") -> "ParameterStyleConfig":
        """Return a copy with the given attributes replaced."""
        values = {slot: getattr(self, slot) for slot in self.__slots__}
        unknown = set(kwargs) - set(values)
        if unknown:
            msg = f"Unknown ParameterStyleConfig attributes: {', '.join(sorted(unknown))}"
            raise ImproperConfigurationError(msg)
        values.update(kwargs)
        return type(self)(**values)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterStyleConfig):
            return False
        return all(getattr(self, slot) == getattr(other, slot) for slot in self.__slots__)

    def __hash__(self) -> int:
        return hash((self.default_parameter_style, tuple(sorted(self.supported_parameter_styles)), self.dialect))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(default_parameter_style={self.default_parameter_style!r}, "
            f"supported_parameter_styles={self.supported_parameter_styles!r}, dialect={self.dialect!r})"
        )
