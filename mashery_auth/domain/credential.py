"""
Credential Record Domain Model - Long-lived credentials of a named area.

Domain rules:
- A record may be partially populated; readiness is checked at issuance time
- Secrets are never included in repr() or to_public_dict()
- lease_duration of zero is normalized to the 900 second default
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Mapping


DEFAULT_MAX_QPS = 2
DEFAULT_LEASE_DURATION = 15 * 60

# Request field name -> record attribute
REQUEST_FIELDS = {
    "area_id": "area_id",
    "area_nid": "area_nid",
    "api_key": "api_key",
    "secret": "api_secret",
    "username": "username",
    "password": "password",
    "qps": "max_qps",
    "lease_duration": "lease_duration",
}


@dataclass
class CredentialRecord:
    """
    Credential record - what an operator stores for a Mashery area.

    V2 signatures need area_nid, api_key and api_secret.
    V3 tokens additionally need area_id, username and password.
    """
    area_id: str = ""
    area_nid: int = 0
    api_key: str = field(default="", repr=False)
    api_secret: str = field(default="", repr=False)
    username: str = ""
    password: str = field(default="", repr=False)
    max_qps: int = DEFAULT_MAX_QPS
    lease_duration: int = DEFAULT_LEASE_DURATION

    @classmethod
    def from_request(cls, data: Mapping[str, Any]) -> "CredentialRecord":
        """
        Build a full record from request fields, filling defaults.

        Args:
            data: Parsed request fields (area_id, secret, qps, ...)

        Returns:
            New record with lease_duration normalized
        """
        record = cls()
        record.merge(data)
        return record

    def merge(self, data: Mapping[str, Any]) -> None:
        """
        Overwrite only the fields present in data.

        Omitted fields keep their current value.
        """
        for request_name, attr in REQUEST_FIELDS.items():
            if request_name in data and data[request_name] is not None:
                setattr(self, attr, data[request_name])
        self.normalize()

    def normalize(self) -> None:
        """Reset a zero or negative lease duration to the default."""
        if not self.lease_duration or self.lease_duration <= 0:
            self.lease_duration = DEFAULT_LEASE_DURATION

    def supplies_key_and_secret(self) -> bool:
        """Check api key and secret are both set."""
        return bool(self.api_key) and bool(self.api_secret)

    def sufficient_for_v2(self) -> bool:
        """Check the record can produce a V2 signature."""
        return self.area_nid != 0 and self.supplies_key_and_secret()

    def sufficient_for_v3(self) -> bool:
        """Check the record can be exchanged for a V3 access token."""
        return (
            bool(self.area_id)
            and self.supplies_key_and_secret()
            and bool(self.username)
            and bool(self.password)
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the stored JSON shape.

        WARNING: Contains secrets. Only for the storage backend.
        """
        return {
            "area_id": self.area_id,
            "area_nid": self.area_nid,
            "api_key": self.api_key,
            "secret": self.api_secret,
            "username": self.username,
            "password": self.password,
            "qps": self.max_qps,
            "duration": self.lease_duration,
        }

    def to_public_dict(self) -> Dict[str, Any]:
        """Serialize without secrets (safe to log or return)."""
        return {
            "area_id": self.area_id,
            "area_nid": self.area_nid,
            "username": self.username,
            "qps": self.max_qps,
            "lease_duration": self.lease_duration,
            "v2_ready": self.sufficient_for_v2(),
            "v3_ready": self.sufficient_for_v3(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CredentialRecord":
        """Deserialize from the stored JSON shape, normalizing a missing or zero duration."""
        record = cls(
            area_id=data.get("area_id", ""),
            area_nid=int(data.get("area_nid", 0)),
            api_key=data.get("api_key", ""),
            api_secret=data.get("secret", ""),
            username=data.get("username", ""),
            password=data.get("password", ""),
            max_qps=int(data.get("qps", DEFAULT_MAX_QPS)),
            lease_duration=int(data.get("duration", DEFAULT_LEASE_DURATION)),
        )
        record.normalize()
        return record
