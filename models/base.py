from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Optional


class BaseGolfModel(BaseModel):
    """Shared configuration for scoring models: assignments are validated too."""
    model_config = ConfigDict(validate_assignment=True)

    def update_field(self, field_name: str, value: Any) -> Optional[str]:
        """Apply a correction in place. Returns the validation message if it is rejected."""
        try:
            setattr(self, field_name, value)
            return None
        except ValidationError as e:
            return e.errors()[0]['msg']

    def revised(self, **changes: Any):
        """Validated copy with some fields replaced; this model is left untouched."""
        return type(self).model_validate({**dict(self), **changes})
