"""Type aliases shared across layers."""

from typing import Any

# Partial update payload produced by UpdateSchema.to_update_dict()
type UpdateData = dict[str, Any]
