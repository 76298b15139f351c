from typing import Any, Optional
from pydantic import BaseModel

class ResponseModel(BaseModel):
    """Error envelope returned by the global exception handler."""
    code: int = 400
    message: str = "error"
    data: Optional[Any] = None

    @staticmethod
    def fail(code: int = 400, message: str = "error", data: Any = None):
        return {"code": code, "message": message, "data": data}


# OpenAPI descriptions for the error envelope, shared by the routers
NOT_FOUND_RESPONSE = {404: {"model": ResponseModel, "description": "Record not found"}}
BAD_INPUT_RESPONSE = {400: {"model": ResponseModel, "description": "Invalid request body"}}
