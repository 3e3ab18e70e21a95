"""Human-readable labels for payment-terms codes."""

from typing import Union

from ...models.invoicing.invoice import PaymentTerms

PAYMENT_TERMS_LABELS = {
  PaymentTerms.TERMS_1: "Net 1 Day",
  PaymentTerms.TERMS_7: "Net 7 Days",
  PaymentTerms.TERMS_14: "Net 14 Days",
  PaymentTerms.TERMS_30: "Net 30 Days",
}


def payment_terms_label(code: Union[PaymentTerms, str]) -> str:
  """
  Get the display label of a payment-terms code.

  Args:
      code: PaymentTerms member or its string value

  Returns:
      Label such as "Net 30 Days"

  Raises:
      KeyError: If the code is not a known payment-terms code
  """
  try:
    terms = PaymentTerms(code)
  except ValueError:
    raise KeyError(code) from None
  return PAYMENT_TERMS_LABELS[terms]
