# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from symera.model.date_like import DateLike


class Task(TypedDict):
    id: Optional[int]
    title: Optional[str]
    event_id: Optional[int]
    due_date: Optional[DateLike]
    status: str
    priority: str
