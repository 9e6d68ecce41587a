from atomizer.parser.classname import ClassName, parse_class_name
from atomizer.parser.scanner import ScanResult, candidates, parse, recognize, scan

__all__ = [
    "ClassName",
    "parse_class_name",
    "ScanResult",
    "candidates",
    "recognize",
    "parse",
    "scan",
]
