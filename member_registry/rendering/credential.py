"""PDF membership credential. Synchronous; callers run it off the event loop."""

import io
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo

from reportlab.lib.colors import Color
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from member_registry.application.exceptions import RenderError
from member_registry.domain.models.member import Member

PAGE_SIZE = (400, 300)
FONT = "Helvetica-Bold"
INK = Color(0, 0.3, 0.6)
LOGO_BOX = (75, 0, 250, 200)  # x, y, width, height
DATE_FORMAT = "%d/%m/%Y, %H:%M:%S"


class CredentialRenderer:
    """
    Renders a single-page credential: organisation title, member name, national ID,
    membership number and request time, plus an optional PNG logo.
    Any failure is raised as RenderError.
    """

    def __init__(
        self,
        title: str,
        timezone_name: str,
        logo_path: Optional[str] = None,
    ) -> None:
        self._title = title
        self._tz = ZoneInfo(timezone_name)
        self._logo_path = Path(logo_path) if logo_path else None

    def render(self, member: Member, now: Optional[datetime] = None) -> bytes:
        requested_at = (now or datetime.now(timezone.utc)).astimezone(self._tz)
        try:
            buf = io.BytesIO()
            pdf = canvas.Canvas(buf, pagesize=PAGE_SIZE)
            pdf.setFillColor(INK)

            pdf.setFont(FONT, 14)
            pdf.drawString(20, 260, self._title)
            pdf.setFont(FONT, 12)
            pdf.drawString(20, 230, f"Nombre: {member.full_name}")
            pdf.drawString(20, 210, f"DNI: {member.national_id}")
            pdf.drawString(20, 190, f"N° Afiliado: {member.membership_number}")
            pdf.setFont(FONT, 10)
            pdf.drawString(
                20, 170, f"Fecha de solicitud: {requested_at.strftime(DATE_FORMAT)}"
            )

            if self._logo_path is not None and self._logo_path.is_file():
                x, y, width, height = LOGO_BOX
                pdf.drawImage(
                    ImageReader(str(self._logo_path)),
                    x,
                    y,
                    width=width,
                    height=height,
                    mask="auto",
                )

            pdf.showPage()
            pdf.save()
            return buf.getvalue()
        except Exception as e:
            raise RenderError(f"Error generando el PDF: {e}") from e
