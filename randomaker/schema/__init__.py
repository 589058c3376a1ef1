from randomaker.schema.request import InvocationRequest
from randomaker.schema.selector import Selector

__all__ = ["InvocationRequest", "Selector"]
