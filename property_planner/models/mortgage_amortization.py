"""
Mortgage amortization calculations.

This module provides the closed-form payment and remaining-balance formulas
used by the Sell-or-Keep scenarios, plus a month-by-month amortization
schedule for display. Rates are annual percentages (4.0 means 4 %).
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class MortgageType(str, Enum):
    """Repayment style of a mortgage."""

    INTEREST_ONLY = "interest_only"
    ANNUITY = "annuity"


class PaymentBreakdown(BaseModel):
    """Breakdown of a single monthly mortgage payment."""

    payment_number: int = Field(..., ge=1, description="Payment number (1-based)")
    beginning_balance: float = Field(..., description="Balance at start of month")
    payment_amount: float = Field(..., description="Total payment amount")
    interest_payment: float = Field(..., description="Interest portion of payment")
    principal_payment: float = Field(..., description="Principal portion of payment")
    ending_balance: float = Field(..., description="Balance at end of month")
    cumulative_interest: float = Field(..., description="Interest paid so far")
    cumulative_principal: float = Field(..., description="Principal repaid so far")


class AmortizationSchedule(BaseModel):
    """Complete amortization schedule for a loan."""

    principal: float = Field(..., description="Original loan principal")
    annual_rate: float = Field(..., description="Annual interest rate (%)")
    term_years: int = Field(..., description="Loan term in years")
    mortgage_type: MortgageType
    monthly_payment: float = Field(..., description="Regular monthly payment")
    payments: List[PaymentBreakdown] = Field(default_factory=list)
    total_interest: float = Field(..., description="Interest over life of loan")
    total_principal: float = Field(..., description="Principal over life of loan")


class MortgageCalculator:
    """Calculator for mortgage payments, balances and schedules."""

    @staticmethod
    def calculate_monthly_payment(
        principal: float,
        annual_rate: float,
        term_years: int,
        mortgage_type: MortgageType = MortgageType.ANNUITY,
    ) -> float:
        """
        Calculate the monthly mortgage payment.

        Args:
            principal: Loan principal amount
            annual_rate: Annual interest rate in percent (e.g., 4.0)
            term_years: Loan term in years
            mortgage_type: Interest-only or annuity repayment

        Returns:
            Monthly payment amount (0 when there is nothing to repay)
        """
        if principal <= 0 or term_years <= 0:
            return 0.0

        monthly_rate = annual_rate / 100 / 12

        if mortgage_type == MortgageType.INTEREST_ONLY:
            return principal * monthly_rate

        num_payments = term_years * 12
        if monthly_rate == 0:
            return principal / num_payments

        growth = (1 + monthly_rate) ** num_payments
        return principal * (monthly_rate * growth) / (growth - 1)

    @staticmethod
    def calculate_remaining_balance(
        principal: float,
        annual_rate: float,
        total_years: float,
        years_elapsed: float,
        mortgage_type: MortgageType = MortgageType.ANNUITY,
    ) -> float:
        """
        Calculate the outstanding balance after a number of years.

        Interest-only loans never amortize, so the balance stays at the
        original principal for the whole term.

        Args:
            principal: Original loan principal
            annual_rate: Annual interest rate in percent
            total_years: Full loan term in years
            years_elapsed: Years of payments already made
            mortgage_type: Interest-only or annuity repayment

        Returns:
            Remaining principal
        """
        if mortgage_type == MortgageType.INTEREST_ONLY:
            return principal

        if years_elapsed >= total_years:
            return 0.0

        if annual_rate <= 0:
            return principal * (1 - years_elapsed / total_years)

        monthly_rate = annual_rate / 100 / 12
        total_growth = (1 + monthly_rate) ** (total_years * 12)
        elapsed_growth = (1 + monthly_rate) ** (years_elapsed * 12)
        return principal * (total_growth - elapsed_growth) / (total_growth - 1)

    @staticmethod
    def generate_amortization_schedule(
        principal: float,
        annual_rate: float,
        term_years: int,
        mortgage_type: MortgageType = MortgageType.ANNUITY,
    ) -> AmortizationSchedule:
        """
        Generate a month-by-month amortization schedule.

        Interest-only loans repay the full principal with the last payment.
        Reported amounts are rounded to cents; the running balance is not.

        Args:
            principal: Loan principal amount
            annual_rate: Annual interest rate in percent
            term_years: Loan term in years
            mortgage_type: Interest-only or annuity repayment

        Returns:
            Complete amortization schedule
        """
        monthly_payment = MortgageCalculator.calculate_monthly_payment(
            principal, annual_rate, term_years, mortgage_type
        )
        monthly_rate = annual_rate / 100 / 12
        num_payments = max(0, term_years * 12) if principal > 0 else 0

        payments = []
        balance = principal
        cumulative_interest = 0.0
        cumulative_principal = 0.0

        for payment_number in range(1, num_payments + 1):
            interest_payment = balance * monthly_rate

            if mortgage_type == MortgageType.INTEREST_ONLY:
                principal_payment = balance if payment_number == num_payments else 0.0
            else:
                principal_payment = min(balance, monthly_payment - interest_payment)
                if payment_number == num_payments:
                    # Absorb floating point residue in the final payment
                    principal_payment = balance

            ending_balance = max(0.0, balance - principal_payment)
            cumulative_interest += interest_payment
            cumulative_principal += principal_payment

            payments.append(
                PaymentBreakdown(
                    payment_number=payment_number,
                    beginning_balance=round(balance, 2),
                    payment_amount=round(interest_payment + principal_payment, 2),
                    interest_payment=round(interest_payment, 2),
                    principal_payment=round(principal_payment, 2),
                    ending_balance=round(ending_balance, 2),
                    cumulative_interest=round(cumulative_interest, 2),
                    cumulative_principal=round(cumulative_principal, 2),
                )
            )

            balance = ending_balance

        return AmortizationSchedule(
            principal=principal,
            annual_rate=annual_rate,
            term_years=term_years,
            mortgage_type=mortgage_type,
            monthly_payment=round(monthly_payment, 2),
            payments=payments,
            total_interest=round(cumulative_interest, 2),
            total_principal=round(cumulative_principal, 2),
        )


def monthly_payment(
    principal: float,
    annual_rate: float,
    term_years: int,
    mortgage_type: MortgageType = MortgageType.ANNUITY,
) -> float:
    """Shorthand for MortgageCalculator.calculate_monthly_payment."""
    return MortgageCalculator.calculate_monthly_payment(
        principal, annual_rate, term_years, mortgage_type
    )


def remaining_balance(
    principal: float,
    annual_rate: float,
    total_years: float,
    years_elapsed: float,
    mortgage_type: MortgageType = MortgageType.ANNUITY,
) -> float:
    """Shorthand for MortgageCalculator.calculate_remaining_balance."""
    return MortgageCalculator.calculate_remaining_balance(
        principal, annual_rate, total_years, years_elapsed, mortgage_type
    )
