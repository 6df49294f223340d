"""
名称过滤：exclude 优先于 include
"""

import re
from typing import Optional, Union

Pattern = Union[str, re.Pattern]


def _search(pattern: Pattern, name: str) -> bool:
    if isinstance(pattern, str):
        return re.search(pattern, name) is not None
    return pattern.search(name) is not None


def matches(
    name: str,
    include: Optional[Pattern] = None,
    exclude: Optional[Pattern] = None,
) -> bool:
    """
    判断资源名称是否通过过滤

    - exclude 存在且匹配 → False（直接返回）
    - include 存在且不匹配 → False
    - 其余情况 → True

    匹配使用 re.search，普通子串同样有效
    """
    if exclude is not None and _search(exclude, name):
        return False
    if include is not None and not _search(include, name):
        return False
    return True


class NameFilter:
    """持有编译后的 include/exclude 规则"""

    def __init__(
        self,
        include: Optional[Pattern] = None,
        exclude: Optional[Pattern] = None,
    ):
        self.include = re.compile(include) if isinstance(include, str) else include
        self.exclude = re.compile(exclude) if isinstance(exclude, str) else exclude

    def matches(self, name: str) -> bool:
        return matches(name, self.include, self.exclude)

    def __repr__(self) -> str:
        include = self.include.pattern if self.include else None
        exclude = self.exclude.pattern if self.exclude else None
        return f"NameFilter(include={include!r}, exclude={exclude!r})"
