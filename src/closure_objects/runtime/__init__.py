from .object_runtime import LiveObject, ObjectRuntime

__all__ = ['LiveObject', 'ObjectRuntime']
