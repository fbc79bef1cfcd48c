"""Schema of the OpenWeatherMap 5 day / 3 hour forecast response."""

from pydantic import BaseModel, Field, ValidationError, model_validator


class ForecastPayloadError(Exception):
    """Raised when a forecast response body does not match the schema."""


class CityInfo(BaseModel):
    name: str
    country: str = ""


class MainReadings(BaseModel):
    temp: float


class WeatherCondition(BaseModel):
    description: str
    icon: str


class ForecastSample(BaseModel):
    dt: int = Field(ge=0)
    main: MainReadings
    weather: list[WeatherCondition] = Field(min_length=1)


class ForecastPayload(BaseModel):
    city: CityInfo
    cnt: int = Field(ge=0)
    samples: list[ForecastSample] = Field(alias="list")

    @model_validator(mode="after")
    def _cnt_within_samples(self) -> "ForecastPayload":
        if self.cnt > len(self.samples):
            raise ValueError(
                f"cnt={self.cnt} exceeds {len(self.samples)} samples"
            )
        return self


def parse_payload(raw: object) -> ForecastPayload:
    try:
        return ForecastPayload.model_validate(raw)
    except ValidationError as e:
        raise ForecastPayloadError(f"Malformed forecast payload: {e}") from e
