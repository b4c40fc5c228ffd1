"""Pure functions for laying out claim pages as plain text.

Every number on a page is printed with Thai digits. Blank fields keep the
dotted leaders of the paper form so the page can still be filled in by hand.
"""

import math

from thaiclaim.dates import format_thai_date
from thaiclaim.domain.claim import (
    RHC_LABEL,
    RHC_PLACEHOLDERS,
    RPH_LABEL,
    RPH_PLACEHOLDERS,
    ClaimForm,
    ClaimPage,
    build_training_line,
)
from thaiclaim.domain.numerals import amount_to_thai_text, to_thai_digits

FORM_TITLE = "ใบขอรับเงินค่าตอบแทนเบี้ยเลี้ยงเหมาจ่ายสำหรับเจ้าหน้าที่"
FORM_SUBTITLE = "ที่ปฏิบัติงานในหน่วยบริการสังกัดกระทรวงสาธารณสุข"
CERTIFICATION = (
    "ข้าพเจ้าขอรับรองข้อมูลดังกล่าวเป็นความจริงทุกประการ "
    "และหากมีการเรียกเงินคืน ข้าพเจ้าขอรับผิดชอบคืนเงินแต่เพียงผู้เดียว"
)
BLANK_PERIOD = "." * 14
# Placement level printed for the current workplace
WORKPLACE_LEVEL = 2
# Items 3-7 are left for the claimant to complete by hand
BLANK_WORKPLACE_ITEMS = range(3, 8)
PAGE_WIDTH = 80
PAGE_SEPARATOR = "-" * PAGE_WIDTH


def format_amount_digits(amount: float | None) -> str:
    """Format an amount with Thai digits, dropping a zero fraction."""
    if amount is None or not math.isfinite(amount):
        return ""
    if float(amount).is_integer():
        return to_thai_digits(int(amount))
    return to_thai_digits(amount)


def format_amount_words(amount: float | None) -> str:
    """Spell out an amount, or "" when it is missing."""
    if amount is None:
        return ""
    return amount_to_thai_text(amount)


def format_optional_count(value: int | None) -> str:
    """Format a count with Thai digits, or a dotted leader when missing."""
    if value is None:
        return BLANK_PERIOD
    return to_thai_digits(value)


def render_page(form: ClaimForm, page: ClaimPage) -> str:
    """Render one monthly page.

    Args:
        form: Claim form.
        page: Month, year and tenure for this page.

    Returns:
        Page text, lines separated by newlines.
    """
    years = to_thai_digits(page.tenure.years)
    months = to_thai_digits(page.tenure.months)
    rph_line = build_training_line(RPH_LABEL, form.rph, RPH_PLACEHOLDERS)
    rhc_line = build_training_line(RHC_LABEL, form.rhc, RHC_PLACEHOLDERS)

    lines = [
        FORM_TITLE.center(PAGE_WIDTH).rstrip(),
        FORM_SUBTITLE.center(PAGE_WIDTH).rstrip(),
        "",
        f"หน่วยบริการ...........{form.unit}.................".rjust(PAGE_WIDTH),
        f"ประจำเดือน.....{page.month}.....พ.ศ.....{to_thai_digits(page.year)}".rjust(PAGE_WIDTH),
        (
            f"ข้าพเจ้าชื่อ.....{form.name}.....นามสกุล.....{form.surname}....."
            f"ตำแหน่ง.....{form.position}.....ปัจจุบันปฏิบัติงานที่.....{form.current_workplace}....."
            f"จังหวัด.....{form.province}.....ระดับ/กลุ่ม.....{form.level}....."
            f"ปฏิบัติงานในหน่วยบริการ.....{years}.....ปี.....{months}.....เดือน "
            "(นับถึงสิ้นเดือนที่เบิกจ่าย) โดยมีรายละเอียดการปฏิบัติงาน ดังนี้ (เฉพาะสายแพทย์ตอบข้อ ๑ ด้วย)"
        ),
        (
            "๑. ฝึกเพิ่มพูนทักษะ (ปีที่ ๑) รวมระยะเวลาการปฏิบัติงาน"
            f"{format_optional_count(form.training_practice_years)}ปี"
            f"{format_optional_count(form.training_practice_months)}เดือน ดังนี้"
        ),
        f"        {rph_line.main}",
        f"              {rph_line.period}",
        f"        {rhc_line.main}",
        f"              {rhc_line.period}",
        (
            f"๒. ปฏิบัติงานที่โรงพยาบาล.....{form.current_workplace}.....จังหวัด.....{form.province}....."
            f"จัดระดับ.....ปกติ ระดับ.....{to_thai_digits(WORKPLACE_LEVEL)}....."
            f"ตั้งแต่วันที่.....{format_thai_date(form.start_date)}....."
            f"ถึงวันที่.....{format_thai_date(form.end_date)}....."
            f"รวม.....{years}.....ปี.....{months}.....เดือน.....วัน"
        ),
    ]

    for item in BLANK_WORKPLACE_ITEMS:
        lines.append(
            f"{to_thai_digits(item)}. ปฏิบัติงานที่โรงพยาบาล............................"
            "จังหวัด..........................จัดระดับ.................................."
        )
        lines.append(
            "      ตั้งแต่วันที่..................................... ถึงวันที่ .............................. "
            "รวม..............ปี.........เดือน...........วัน"
        )

    lines += [
        (
            f"รวมทั้งสิ้น.....{years}.....ปี.....{months}.....เดือน.....วัน "
            f"จำนวนที่ขอเบิก.....{format_amount_digits(form.amount)}.....บาท "
            f"(...{format_amount_words(form.amount)}...)"
        ),
        CERTIFICATION,
        "",
        "",
        f"({form.name} {form.surname})".center(PAGE_WIDTH).rstrip(),
        f"ตำแหน่ง {form.position}".center(PAGE_WIDTH).rstrip(),
    ]
    return "\n".join(lines)


def render_document(form: ClaimForm, pages: list[ClaimPage]) -> str:
    """Render all pages, separated by a dashed rule.

    Args:
        form: Claim form.
        pages: Pages in print order.

    Returns:
        Document text ending with a newline.
    """
    rendered = [render_page(form, page) for page in pages]
    return f"\n{PAGE_SEPARATOR}\n".join(rendered) + "\n"
