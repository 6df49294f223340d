"""
资源描述模型
Docker API 列表接口返回的原始条目，统一为一种不可变结构
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Tuple

from .enums import ResourceKind
from .utils.time_utils import to_utc_datetime


@dataclass(frozen=True)
class ResourceDescriptor:
    """列表中的一条资源记录，以 Docker 为准，本系统不做修改"""

    kind: ResourceKind
    id: str
    names: Tuple[str, ...]
    created_at: datetime  # 带时区的 UTC 时间
    attrs: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def name(self) -> str:
        """主显示名称（多个名称时取第一个，去掉 Docker 的前导 /）"""
        if not self.names:
            return self.id
        return self.names[0].lstrip("/")

    @classmethod
    def from_container(cls, info: Dict[str, Any]) -> "ResourceDescriptor":
        """
        由 APIClient.containers() 的条目构建

        Created 为 Unix 时间戳（秒）
        """
        return cls(
            kind=ResourceKind.CONTAINER,
            id=info["Id"],
            names=tuple(info.get("Names") or ()),
            created_at=to_utc_datetime(info["Created"]),
            attrs=info,
        )

    @classmethod
    def from_service(cls, info: Dict[str, Any]) -> "ResourceDescriptor":
        """
        由 APIClient.services() 的条目构建

        CreatedAt 为 ISO 8601 字符串（纳秒精度）
        """
        spec_name = (info.get("Spec") or {}).get("Name")
        return cls(
            kind=ResourceKind.SERVICE,
            id=info["ID"],
            names=(spec_name,) if spec_name else (),
            created_at=to_utc_datetime(info["CreatedAt"]),
            attrs=info,
        )
