from typing import Optional

from ..base_model import BaseModel


class SecretPutRequest(BaseModel):
    key: Optional[str] = None
    message: Optional[str] = None
    tag: Optional[str] = None
