"""URL value object: a protocol plus a validated domain.

Canonical text form is ``protocol://domain``, and parsing that text always
reproduces an equal Url.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, ValidationError
from pydantic_core import CoreSchema

from type_more.core.enums import ErrorCode
from type_more.core.errors import ParseError, TypeMoreError
from type_more.core.result import Failure, Result, Success
from type_more.core.serialization import from_json, text_value_schema, to_json
from type_more.core.validation import validate_pattern

SCHEME_SEPARATOR = "://"


class Protocol(str, Enum):
    """Supported URL protocols (lowercase canonical names)."""

    HTTP = "http"
    HTTPS = "https"
    FTP = "ftp"
    SFTP = "sftp"
    FTPS = "ftps"
    SSH = "ssh"
    TELNET = "telnet"
    FILE = "file"
    WS = "ws"
    WSS = "wss"
    GOPHER = "gopher"
    LDAP = "ldap"
    RTSP = "rtsp"
    SMB = "smb"
    NFS = "nfs"
    IMAP = "imap"
    POP3 = "pop3"
    NNTP = "nntp"

    @classmethod
    def parse(cls, raw: Any) -> Result["Protocol", TypeMoreError]:
        """Parse a protocol name (exact, case-sensitive).

        Args:
            raw: Candidate protocol name, e.g. "https".

        Returns:
            Success with Protocol, or Failure with ParseError("invalid protocol").
        """
        try:
            return Success(value=cls(raw))
        except ValueError:
            return Failure(
                error=ParseError(
                    code=ErrorCode.INVALID_PROTOCOL,
                    message="invalid protocol",
                )
            )

    def to_text(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Url:
    """URL value object with domain validation.

    The domain is one or more hostname labels (1-63 alphanumeric or hyphen
    characters, not starting or ending with a hyphen) followed by a final
    label of two or more letters, optionally followed by path segments made
    of unreserved and sub-delim characters.

    Attributes:
        protocol: The URL protocol.
        domain: Hostname plus optional path (validated, unchanged).

    Raises:
        ValueError: If constructed directly with an invalid domain.

    Example:
        >>> url = Url.parse("https://example.com/path").value
        >>> url.protocol, url.domain
        (<Protocol.HTTPS: 'https'>, 'example.com/path')
        >>> str(url)
        'https://example.com/path'
    """

    protocol: Protocol
    domain: str

    DOMAIN_PATTERN: ClassVar[str] = (
        r"(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}"
        r"(?:/[a-zA-Z0-9._~!$&'()*+,;=:@%-]*)*"
    )

    def __post_init__(self) -> None:
        """Validate protocol and domain after initialization.

        Raises:
            ValueError: If protocol is not a Protocol or the domain is invalid.
        """
        if not isinstance(self.protocol, Protocol):
            raise ValueError("parse error! invalid protocol")
        result = _validate_domain(self.domain)
        if isinstance(result, Failure):
            raise ValueError(str(result.error))

    @classmethod
    def parse_domain(cls, protocol: Protocol, domain: Any) -> Result["Url", TypeMoreError]:
        """Build a Url from a protocol and a raw domain.

        Args:
            protocol: Already-parsed protocol.
            domain: Candidate hostname with optional path.

        Returns:
            Success with Url, or Failure with ParseError("invalid domain").
        """
        result = _validate_domain(domain)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(protocol=protocol, domain=result.value))

    @classmethod
    def parse(cls, raw: Any) -> Result["Url", TypeMoreError]:
        """Parse ``protocol://domain`` text into a Url.

        The text must contain exactly one "://". Protocol and domain failures
        propagate unchanged.

        Args:
            raw: Candidate URL text.

        Returns:
            Success with Url, or Failure with ParseError ("invalid url",
            "invalid protocol" or "invalid domain").
        """
        parts = raw.split(SCHEME_SEPARATOR) if isinstance(raw, str) else []
        if len(parts) != 2:
            return Failure(
                error=ParseError(code=ErrorCode.INVALID_URL, message="invalid url")
            )

        scheme, domain = parts
        parsed_protocol = Protocol.parse(scheme)
        if isinstance(parsed_protocol, Failure):
            return parsed_protocol
        return cls.parse_domain(parsed_protocol.value, domain)

    @classmethod
    def from_json(cls, text: str | bytes) -> Result["Url", ValidationError]:
        """Deserialize a JSON string scalar, re-running full validation."""
        return from_json(cls, text)

    def to_json(self) -> str:
        """Serialize to a JSON string scalar, e.g. '"ftp://example.com"'."""
        return to_json(self)

    def to_text(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.protocol.value}{SCHEME_SEPARATOR}{self.domain}"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return text_value_schema(cls, cls.parse)


def _validate_domain(domain: Any) -> Result[str, TypeMoreError]:
    # a second separator would make the canonical text unparseable
    if isinstance(domain, str) and SCHEME_SEPARATOR in domain:
        return Failure(
            error=ParseError(code=ErrorCode.INVALID_DOMAIN, message="invalid domain")
        )
    return validate_pattern(
        domain,
        Url.DOMAIN_PATTERN,
        code=ErrorCode.INVALID_DOMAIN,
        message="invalid domain",
    )
