from .applier import PatchState, apply_hunks
from .parser import format_rcs_patch, parse_rcs_patch
from .region import replace_region

__all__ = ["parse_rcs_patch", "format_rcs_patch", "apply_hunks", "PatchState", "replace_region"]
