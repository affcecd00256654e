"""This module defines the model describing how a date is rendered."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

NumericStyle = Literal["numeric", "2-digit"]
TextStyle = Literal["long", "short", "narrow"]
MonthStyle = Literal["numeric", "2-digit", "long", "short", "narrow"]


class FormatOptions(BaseModel):
    """Represents which calendar fields to render and their verbosity.

    Day, month and year are always rendered. Weekday and the time fields
    are rendered only when set; the time part holds exactly the hour,
    minute and second fields requested.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    weekday: TextStyle | None = None
    day: NumericStyle = "numeric"
    month: MonthStyle = "2-digit"
    year: NumericStyle = "numeric"
    hour: NumericStyle | None = None
    minute: NumericStyle | None = None
    second: NumericStyle | None = None

    @property
    def has_time(self) -> bool:
        """Whether any time field was requested."""
        return any(field is not None for field in (self.hour, self.minute, self.second))
