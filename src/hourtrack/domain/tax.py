"""Danish personal income tax estimation."""

import logging
from decimal import Decimal
from typing import Union

from hourtrack.database.base import Database
from hourtrack.domain.entities import TaxDeductions, TaxProfile, TaxReport, UserContext
from hourtrack.domain.errors import ValidationError
from hourtrack.domain.income import IncomeService

logger = logging.getLogger(__name__)

# Bottom/top tax boundary for the modeled tax year.
DEFAULT_TOP_TAX_THRESHOLD = Decimal("552500")

AM_BIDRAG_RATE = Decimal("0.08")
TOPSKAT_RATE = Decimal("0.15")

BUNDSKAT_RATES = {
    TaxProfile.STANDARD: Decimal("0.1209"),
    TaxProfile.PENSIONER: Decimal("0.06045"),
    TaxProfile.STUDENT: Decimal("0.06045"),
}

MUNICIPAL_RATES = {
    TaxProfile.STANDARD: Decimal("0.24"),
    TaxProfile.PENSIONER: Decimal("0.12"),
    TaxProfile.STUDENT: Decimal("0.12"),
}

MUNICIPALITIES = ("Copenhagen", "Aarhus", "Odense", "Aalborg", "Esbjerg")

DEFAULT_MUNICIPALITY = "Copenhagen"

ZERO = Decimal("0")


def resolve_tax_profile(profile: Union[TaxProfile, str]) -> TaxProfile:
    """Resolve a tax profile from an enum member or its value.

    Raises:
        ValidationError: If the profile is not recognized
    """
    if isinstance(profile, TaxProfile):
        return profile
    try:
        return TaxProfile(str(profile).strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in TaxProfile)
        raise ValidationError(f"Unknown tax profile '{profile}'. Must be one of: {valid}")


def calculate_deductions(
    gross_income: Decimal,
    profile: TaxProfile,
    top_tax_threshold: Decimal = DEFAULT_TOP_TAX_THRESHOLD,
) -> TaxDeductions:
    """Calculate the bracketed deductions for a gross income.

    Pensioner and student profiles share the same reduced formulas and pay
    no top tax.
    """
    gross_income = Decimal(str(gross_income))
    top_tax_threshold = Decimal(str(top_tax_threshold))

    am_bidrag = gross_income * AM_BIDRAG_RATE
    bundskat = min(gross_income, top_tax_threshold) * BUNDSKAT_RATES[profile]
    if profile == TaxProfile.STANDARD:
        topskat = max(ZERO, gross_income - top_tax_threshold) * TOPSKAT_RATE
    else:
        topskat = ZERO
    municipal_tax = gross_income * MUNICIPAL_RATES[profile]

    return TaxDeductions(
        am_bidrag=am_bidrag,
        bundskat=bundskat,
        topskat=topskat,
        municipal_tax=municipal_tax,
        total=am_bidrag + bundskat + topskat + municipal_tax,
    )


def estimate_tax(
    gross_income: Decimal,
    profile: Union[TaxProfile, str] = TaxProfile.STANDARD,
    municipality: str = DEFAULT_MUNICIPALITY,
    top_tax_threshold: Decimal = DEFAULT_TOP_TAX_THRESHOLD,
) -> TaxReport:
    """Estimate tax and net income for a gross income figure.

    The municipality is carried into the report but every municipality uses
    the same flat rate. Net income is not clamped at zero.

    Args:
        gross_income: Gross income in DKK
        profile: Tax profile or its string value
        municipality: Municipality name
        top_tax_threshold: Boundary between bottom and top tax

    Returns:
        TaxReport with the deductions and net income

    Raises:
        ValidationError: If the profile is not recognized
        TypeError: If gross_income or municipality is None
    """
    if gross_income is None:
        raise TypeError("gross_income must be a number, not None")
    if municipality is None:
        raise TypeError("municipality must be a string, not None")

    tax_profile = resolve_tax_profile(profile)
    gross = Decimal(str(gross_income))
    deductions = calculate_deductions(gross, tax_profile, top_tax_threshold)
    return TaxReport(
        gross_income=gross,
        deductions=deductions,
        net_income=gross - deductions.total,
        profile=tax_profile,
        municipality=municipality,
    )


class TaxService:
    """Service for estimating tax on a user's tracked income."""

    def __init__(
        self,
        db: Database,
        user: UserContext,
        top_tax_threshold: Decimal = DEFAULT_TOP_TAX_THRESHOLD,
    ):
        """Initialize tax service.

        Args:
            db: Database instance
            user: User whose income is taxed
            top_tax_threshold: Boundary between bottom and top tax
        """
        self.db = db
        self.user = user
        self.top_tax_threshold = top_tax_threshold
        self.income_service = IncomeService(db, user)

    def build_report(
        self,
        profile: Union[TaxProfile, str] = TaxProfile.STANDARD,
        municipality: str = DEFAULT_MUNICIPALITY,
    ) -> TaxReport:
        """Estimate tax on the user's total tracked income."""
        gross_income = self.income_service.get_gross_income()
        logger.debug("Estimating tax on gross income %s for user %s", gross_income, self.user.user_id)
        return estimate_tax(
            gross_income,
            profile=profile,
            municipality=municipality,
            top_tax_threshold=self.top_tax_threshold,
        )
