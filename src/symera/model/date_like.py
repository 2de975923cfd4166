# SPDX-License-Identifier: MIT

import datetime
from typing import TypeAlias

# datetime.datetime is a subclass of datetime.date, so both are accepted
DateLike: TypeAlias = str | datetime.date
