from pydantic import BaseModel, Field, ConfigDict


class MenuOptionSchema(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(0, ge=0)


class FoodItemCreateSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., gt=0)
    category: str = Field(..., min_length=1, max_length=50)
    image: str = Field(..., min_length=1)
    is_available: bool = Field(False, alias="isAvailable")
    sizes: list[MenuOptionSchema] = []
    toppings: list[MenuOptionSchema] = []


class FoodItemUpdateSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, min_length=1, max_length=100)
    price: float | None = Field(None, gt=0)
    category: str | None = Field(None, min_length=1, max_length=50)
    image: str | None = None
    is_available: bool | None = Field(None, alias="isAvailable")
    sizes: list[MenuOptionSchema] | None = None
    toppings: list[MenuOptionSchema] | None = None


class FoodItemSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    price: float
    category: str
    image: str
    is_available: bool = Field(..., alias="isAvailable")
    sizes: list[MenuOptionSchema]
    toppings: list[MenuOptionSchema]


class MenuResponseSchema(BaseModel):
    items: list[FoodItemSchema]
    categories: list[str]
