"""Endpoint and query URL construction for DoH providers."""
import requests

from dohclient.models import (
    Provider,
    ProviderKind,
    RecordType,
    ResolveOptions,
    TypeParamStyle,
)
from dohclient.models.record_type import RecordTypeLike


class EndpointResolver:
    """Maps providers to endpoints and builds query URLs."""

    GOOGLE_URL = "https://dns.google/resolve"
    CLOUDFLARE_URL = "https://cloudflare-dns.com/dns-query"

    ENDPOINTS = {
        ProviderKind.GOOGLE: GOOGLE_URL,
        ProviderKind.CLOUDFLARE: CLOUDFLARE_URL,
    }

    @classmethod
    def endpoint(cls, provider: Provider) -> str:
        """Return the base query URL of a provider.

        Custom URLs are passed through verbatim; a malformed one surfaces
        later as a transport failure.
        """
        if provider.kind is ProviderKind.CUSTOM:
            return provider.url
        return cls.ENDPOINTS[provider.kind]

    @staticmethod
    def type_param(
        record_type: RecordTypeLike,
        style: TypeParamStyle = TypeParamStyle.MNEMONIC,
    ) -> str:
        """Format a record type for the `type` query parameter.

        Unknown types are always sent as their numeric code.
        """
        if style is TypeParamStyle.MNEMONIC and isinstance(record_type, RecordType):
            return record_type.label
        return str(record_type.to_code())

    @classmethod
    def build_query(
        cls,
        base_url: str,
        name: str,
        options: ResolveOptions,
        type_style: TypeParamStyle = TypeParamStyle.MNEMONIC,
    ) -> str:
        """Build the full query URL.

        Args:
            base_url: Provider endpoint
            name: Domain name to resolve
            options: Resolve options
            type_style: Record type convention of the provider

        Returns:
            URL with percent-escaped name, type, cd and do parameters
        """
        params = {
            "name": name,
            "type": cls.type_param(options.type, type_style),
            "cd": "true" if options.checking_disabled else "false",
            "do": "true" if options.dnssec_ok else "false",
        }
        return requests.Request("GET", base_url, params=params).prepare().url

    @classmethod
    def query_url(cls, provider: Provider, name: str, options: ResolveOptions) -> str:
        """Build the full query URL for a provider."""
        return cls.build_query(
            cls.endpoint(provider), name, options, provider.type_param_style
        )
