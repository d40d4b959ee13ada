from pydantic import BaseModel, Field


class ExprTreeConfig(BaseModel):
    # The capacity used when `tree_to_string` is not given one. Matches the
    # 128 byte buffers the expressions were originally rendered into.
    default_capacity: int = Field(128, ge=1)
    # Replaces the last character of a rendering that did not fit.
    truncation_marker: str = Field("$", min_length=1, max_length=1)
    # Print truncation warnings and release summaries
    verbose: bool = False
