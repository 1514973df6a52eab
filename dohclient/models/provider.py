"""DoH provider data model."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ProviderKind(Enum):
    """Kinds of DoH provider a client can be configured with."""
    GOOGLE = "google"
    CLOUDFLARE = "cloudflare"
    CUSTOM = "custom"


class TypeParamStyle(Enum):
    """How the record type is written in the `type` query parameter."""
    NUMERIC = "numeric"
    MNEMONIC = "mnemonic"


@dataclass(frozen=True)
class Provider:
    """A well-known DoH provider or a custom endpoint.

    Attributes:
        kind: Provider kind
        url: Endpoint URL, only set for custom providers
    """
    kind: ProviderKind
    url: Optional[str] = None

    @classmethod
    def google(cls) -> "Provider":
        """Google Public DNS JSON API.

        https://developers.google.com/speed/public-dns/docs/doh/json
        """
        return cls(ProviderKind.GOOGLE)

    @classmethod
    def cloudflare(cls) -> "Provider":
        """Cloudflare 1.1.1.1 JSON API.

        https://developers.cloudflare.com/1.1.1.1/encryption/dns-over-https/make-api-requests/dns-json/
        """
        return cls(ProviderKind.CLOUDFLARE)

    @classmethod
    def custom(cls, url: str) -> "Provider":
        """Any endpoint speaking the DoH JSON API. The URL is not validated."""
        return cls(ProviderKind.CUSTOM, url)

    @classmethod
    def from_name(cls, name: str) -> "Provider":
        """Create Provider from "google", "cloudflare" or an endpoint URL.

        Raises:
            ValueError: If name is neither a known provider nor a URL
        """
        if "://" in name:
            return cls.custom(name)
        key = name.strip().lower()
        if key == ProviderKind.GOOGLE.value:
            return cls.google()
        if key == ProviderKind.CLOUDFLARE.value:
            return cls.cloudflare()
        raise ValueError(f"Unknown DoH provider: {name!r}")

    @property
    def type_param_style(self) -> TypeParamStyle:
        """Record type convention expected by the provider's JSON API."""
        if self.kind is ProviderKind.GOOGLE:
            return TypeParamStyle.NUMERIC
        return TypeParamStyle.MNEMONIC

    def __str__(self) -> str:
        if self.kind is ProviderKind.CUSTOM:
            return self.url or ""
        return self.kind.value
