"""Document rendering: membership credential PDF."""

from member_registry.rendering.credential import CredentialRenderer

__all__ = ["CredentialRenderer"]
