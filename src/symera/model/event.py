# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from symera.model.date_like import DateLike
from symera.model.task import Task


class Event(TypedDict):
    id: Optional[int]
    name: Optional[str]
    event_type: str
    status: str
    date: Optional[DateLike]
    start_date: Optional[DateLike]
    end_date: Optional[DateLike]
    start_time: Optional[str]
    end_time: Optional[str]
    location: Optional[str]
    tasks: Optional[list[Task]]
