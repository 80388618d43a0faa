from pydantic import BaseModel, Field

SELLER_ID_MAX = 2_147_483_647
EMAIL_MAX_LENGTH = 128
NAME_MAX_LENGTH = 128


class SellerSchema(BaseModel):
    seller_id: int | None = Field(default=None, ge=1, le=SELLER_ID_MAX)
    email: str = Field(min_length=1, max_length=EMAIL_MAX_LENGTH)
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
