"""
资源选择模块

- expiration: 过期判定（严格大于阈值）
- name_filter: include/exclude 名称过滤（exclude 优先）
- selector: 组合两者，按列表顺序生成删除集合
"""

from .expiration import ExpirationPolicy, is_expired
from .name_filter import NameFilter, matches
from .selector import Selector, select

__all__ = [
    "ExpirationPolicy",
    "is_expired",
    "NameFilter",
    "matches",
    "Selector",
    "select",
]
