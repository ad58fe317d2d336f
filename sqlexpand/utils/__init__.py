from sqlexpand.utils import logging, schema, serializers, type_guards

__all__ = ("logging", "schema", "serializers", "type_guards")
