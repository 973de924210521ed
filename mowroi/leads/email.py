"""HTML email rendering for new calculator leads."""

from __future__ import annotations

import html
import math
from typing import Any, Optional

from mowroi.engine.numeric import round_int
from mowroi.leads.schema import LeadRequest

_ACCENT = "#E37627"
_H2 = (
    f"color: #000; border-bottom: 2px solid {_ACCENT}; "
    "padding-bottom: 8px; margin-top: 24px;"
)
_LABEL = "padding: 8px; font-weight: bold;"
_CELL = "padding: 8px;"
_STRIPE = ' style="background: #f9f9f9;"'


def escape(value: Any) -> str:
    if value is None or value == "":
        return ""
    return html.escape(str(value), quote=True)


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def format_currency(value: Any) -> str:
    number = _number(value)
    if number is None:
        return "N/A"
    return f"${round_int(number):,}"


def format_quantity(value: Any, unit: str) -> str:
    number = _number(value)
    if number is None:
        return "N/A"
    return f"{round_int(number):,} {unit}"


def format_percent(value: Any) -> str:
    number = _number(value)
    if number is None:
        return "N/A"
    return f"{round_int(number)}%"


def _text_or_na(value: Any) -> str:
    return escape(value) or "N/A"


def _row(label: str, value: str, striped: bool = False) -> str:
    style = _STRIPE if striped else ""
    return (
        f'<tr{style}><td style="{_LABEL}">{label}</td>'
        f'<td style="{_CELL}">{value}</td></tr>'
    )


def _table(rows: list[str]) -> str:
    return (
        '<table style="width: 100%; border-collapse: collapse;">'
        + "".join(rows)
        + "</table>"
    )


def render_subject(lead: LeadRequest) -> str:
    cd = lead.calculator_data
    property_type = cd.get("propertyType") or "Property"
    acreage = cd.get("acreage") or "?"
    return f"New ROI Calculator Lead: {lead.name} — {property_type} ({acreage} acres)"


def render_lead_email(lead: LeadRequest) -> tuple[str, str]:
    """Render ``(subject, html)`` for a validated lead.

    Every user-supplied value is HTML-escaped; absent metrics show "N/A".
    """
    cd = lead.calculator_data

    contact = [
        _row("Name:", escape(lead.name)),
        _row("Email:", f'<a href="mailto:{escape(lead.email)}">{escape(lead.email)}</a>'),
        _row("Phone:", escape(lead.phone) or "Not provided"),
    ]
    if lead.message:
        contact.append(_row("Message:", escape(lead.message)))

    acreage = cd.get("acreage")
    season = cd.get("seasonWeeks")
    property_rows = [
        _row("Property Type:", _text_or_na(cd.get("propertyType")), striped=True),
        _row("Acreage:", f"{escape(acreage) or 'N/A'} acres"),
        _row("Season Length:", f"{escape(season) or 'N/A'} weeks", striped=True),
        _row("Maintenance Type:", _text_or_na(cd.get("maintenanceType"))),
    ]

    metric_rows = [
        (
            '<tr style="background: #FFF3E8;">'
            '<td style="padding: 12px; font-weight: bold; font-size: 16px;">'
            "Projected Annual Savings:</td>"
            f'<td style="padding: 12px; font-size: 18px; font-weight: bold; color: {_ACCENT};">'
            f"{format_currency(cd.get('projectedSavings'))}</td></tr>"
        ),
        _row("ROI:", format_percent(cd.get("roi"))),
        _row("Payback Period:", _text_or_na(cd.get("paybackPeriod")), striped=True),
        _row("Recommended Equipment:", _text_or_na(cd.get("recommendedEquipment"))),
        _row("Total Investment:", format_currency(cd.get("totalInvestment")), striped=True),
        _row("Labor Hours Saved:", format_quantity(cd.get("laborHoursSaved"), "hrs/year")),
        _row("CO₂ Reduced:", format_quantity(cd.get("co2Reduced"), "lbs/year"), striped=True),
    ]

    body = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        '<div style="background: #000; padding: 20px; text-align: center;">'
        f'<h1 style="color: {_ACCENT}; margin: 0; font-size: 24px;">New ROI Calculator Lead</h1>'
        "</div>"
        '<div style="padding: 24px; background: #fff;">'
        f'<h2 style="{_H2}">Contact Information</h2>'
        + _table(contact)
        + f'<h2 style="{_H2}">Calculator Results</h2>'
        + _table(property_rows)
        + f'<h2 style="{_H2}">Key Metrics</h2>'
        + _table(metric_rows)
        + "</div>"
        '<div style="background: #000; padding: 16px; text-align: center;">'
        '<p style="color: #999; margin: 0; font-size: 12px;">'
        "Autonomous Mowing Solutions | autonomousmowingsolutions.com</p>"
        "</div></div>"
    )
    return render_subject(lead), body
