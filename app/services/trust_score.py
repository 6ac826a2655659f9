"""
Trust score calculation for marketplace participants.

Score breakdown (max 100):
  +20  has email
  +20  has phone
  +15  KYC verified
  +15  has a valid GST number
  +10  has a valid Udyam number
  +10  has at least one accepted quote
  +10  has company name filled
"""
import re
from typing import Any, List, Optional, Tuple

MAX_TRUST_SCORE = 100

# 2-digit state code + 10-char PAN + entity number + Z + checksum
GST_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")
UDYAM_PATTERN = re.compile(r"^UDYAM-[A-Z]{2}-[0-9]{2}-[0-9]{7}$")

GST_EXAMPLE = "27AAPFU0939F1ZV"
UDYAM_EXAMPLE = "UDYAM-MH-03-0123456"

TRUST_WEIGHTS = {
    "email": 20,
    "phone": 20,
    "kyc_verified": 15,
    "gst_number": 15,
    "udyam_number": 10,
    "accepted_quotes": 10,
    "company": 10,
}

TRUST_FIELDS = (
    "email",
    "phone",
    "is_verified",
    "gst_number",
    "udyam_number",
    "company",
    "accepted_quotes_count",
)


def normalize_gst(gst: str) -> str:
    return gst.strip().upper()


def normalize_udyam(udyam: str) -> str:
    return udyam.strip().upper()


def is_valid_gst(gst: Any) -> bool:
    if not isinstance(gst, str):
        return False
    return GST_PATTERN.match(normalize_gst(gst)) is not None


def is_valid_udyam(udyam: Any) -> bool:
    if not isinstance(udyam, str):
        return False
    return UDYAM_PATTERN.match(normalize_udyam(udyam)) is not None


def _has_accepted_quotes(count: Any) -> bool:
    if isinstance(count, str):
        try:
            count = float(count)
        except ValueError:
            return False
    try:
        return count is not None and count > 0
    except TypeError:
        return False


def trust_signals(
    email: Optional[str] = None,
    phone: Optional[str] = None,
    is_verified: Optional[bool] = None,
    gst_number: Optional[str] = None,
    udyam_number: Optional[str] = None,
    company: Optional[str] = None,
    accepted_quotes_count: Optional[int] = None,
) -> List[str]:
    """Returns the names of the satisfied signals, in weight-table order."""
    satisfied = []
    if email:
        satisfied.append("email")
    if phone:
        satisfied.append("phone")
    if is_verified:
        satisfied.append("kyc_verified")
    if gst_number and is_valid_gst(gst_number):
        satisfied.append("gst_number")
    if udyam_number and is_valid_udyam(udyam_number):
        satisfied.append("udyam_number")
    if _has_accepted_quotes(accepted_quotes_count):
        satisfied.append("accepted_quotes")
    if company:
        satisfied.append("company")
    return satisfied


def calculate_trust_score_with_breakdown(**fields) -> Tuple[int, List[str]]:
    # Keys outside the weight table (name, location, ...) are ignored
    known = {key: value for key, value in fields.items() if key in TRUST_FIELDS}
    signals = trust_signals(**known)
    score = sum(TRUST_WEIGHTS[name] for name in signals)
    return min(score, MAX_TRUST_SCORE), signals


def calculate_trust_score(**fields) -> int:
    """
    Calculate trust score from participant verification fields.
    Unknown or malformed values simply contribute nothing.
    """
    score, _ = calculate_trust_score_with_breakdown(**fields)
    return score
