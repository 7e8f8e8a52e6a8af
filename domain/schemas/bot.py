from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, model_validator


class DayHoursSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_hour: int = Field(..., ge=0, le=24, alias="startHour")
    end_hour: int = Field(..., ge=0, le=24, alias="endHour")


class WeekScheduleSchema(BaseModel):
    Dushanba: DayHoursSchema
    Seshanba: DayHoursSchema
    Chorshanba: DayHoursSchema
    Payshanba: DayHoursSchema
    Juma: DayHoursSchema
    Shanba: DayHoursSchema
    Yakshanba: DayHoursSchema


class BotScheduleUpdateSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schedule: WeekScheduleSchema
    is_emergency_off: bool = Field(False, alias="isEmergencyOff")


class BotScheduleSchema(BotScheduleUpdateSchema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    updated_at: datetime | None = Field(None, alias="updatedAt")


class BroadcastRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    image_url: str | None = Field(None, alias="imageUrl")

    @model_validator(mode="before")
    @classmethod
    def strip_blank(cls, data):
        if isinstance(data, dict):
            return {k: v.strip() if isinstance(v, str) else v for k, v in data.items()}
        return data
