from typing import Any, Dict, Optional, Tuple, Type, TypeVar
from pydantic import BaseModel, ValidationError
from .schema import ObservationSeries, StationDirectory

M = TypeVar("M", bound=BaseModel)

class PayloadValidator:
    def validate(self, model: Type[M], payload: Any) -> Tuple[Optional[M], str]:
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            return None, f"expected a JSON object, got {type(payload).__name__}"
        try:
            return model.model_validate(payload), ""
        except ValidationError as e:
            return None, str(e)

    def validate_directory(self, payload: Dict[str, Any]) -> Tuple[Optional[StationDirectory], str]:
        return self.validate(StationDirectory, payload)

    def validate_series(self, payload: Dict[str, Any]) -> Tuple[Optional[ObservationSeries], str]:
        return self.validate(ObservationSeries, payload)
