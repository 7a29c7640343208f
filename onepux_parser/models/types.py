"""Type alias for the generic JSON value tree of an export document."""
from typing import Union

JSONType = Union[str, int, float, bool, None, list["JSONType"], dict[str, "JSONType"]]
