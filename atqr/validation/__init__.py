from atqr.validation.interpreter import PayloadInterpreter
from atqr.validation.materializer import materialize
from atqr.validation.parser import parse_payload
from atqr.validation.validator import StructuralValidator

__all__ = ["PayloadInterpreter", "StructuralValidator", "materialize", "parse_payload"]
