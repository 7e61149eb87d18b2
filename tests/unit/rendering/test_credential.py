"""Credential renderer tests: PDF output and RenderError on failure."""

from datetime import datetime, timezone

import pytest

from member_registry.application.exceptions import RenderError
from member_registry.domain.models.member import Member
from member_registry.rendering.credential import CredentialRenderer

MEMBER = Member(id=1, membership_number="1001", full_name="Ana Diaz", national_id="30111222")


def test_render_returns_pdf_bytes():
    renderer = CredentialRenderer(
        title="ASOCIACIÓN MUTUAL",
        timezone_name="America/Argentina/Buenos_Aires",
        logo_path=None,
    )
    pdf = renderer.render(MEMBER, now=datetime(2024, 5, 1, 15, 0, tzinfo=timezone.utc))
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 500


def test_missing_logo_is_skipped(tmp_path):
    renderer = CredentialRenderer(
        title="ASOCIACIÓN MUTUAL",
        timezone_name="UTC",
        logo_path=str(tmp_path / "absent.png"),
    )
    assert renderer.render(MEMBER).startswith(b"%PDF")


def test_corrupt_logo_raises_render_error(tmp_path):
    logo = tmp_path / "logo.png"
    logo.write_bytes(b"not an image")
    renderer = CredentialRenderer(title="X", timezone_name="UTC", logo_path=str(logo))
    with pytest.raises(RenderError):
        renderer.render(MEMBER)
