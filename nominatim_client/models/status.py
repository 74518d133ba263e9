from typing import Optional

from pydantic import BaseModel, ConfigDict


class Status(BaseModel):
    """The status of a Nominatim server.

    A status of 0 means the server is working; anything else comes with an
    error message (e.g. 700 "No database").
    """

    model_config = ConfigDict(frozen=True)

    status: int
    message: str
    data_updated: Optional[str] = None
    software_version: Optional[str] = None
    database_version: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == 0
