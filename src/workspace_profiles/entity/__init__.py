"""Workspace Profiles — entidades de servidor (core).

Componentes:
 - server: ServerProfile / ServerIdentity / ServerUpdateRequest e decoders
 - auth / port_forward: sub-entidades opcionais
 - query: saved query (template de requisição)
 - fingerprint: hashing canônico do port-forward
"""

from .auth import Auth, AuthScheme, decode_auth  # noqa: F401
from .fingerprint import canonical_bytes, fingerprint  # noqa: F401
from .port_forward import PortForward, decode_port_forward  # noqa: F401
from .query import SavedQuery, decode_saved_query  # noqa: F401
from .server import (  # noqa: F401
    ServerIdentity,
    ServerProfile,
    ServerUpdateRequest,
    decode_server_identity,
    decode_server_profile,
    decode_server_update,
    has_active_port_forward,
)
