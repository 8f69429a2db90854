from typing import Annotated

from pydantic import Field

# Integer columns are 32-bit; anything larger can never match a row
MAX_DB_INT = 2**31 - 1

DbId = Annotated[int, Field(ge=1, le=MAX_DB_INT)]
