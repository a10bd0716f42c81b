# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Billing records. They are read only snapshots; numeric codes are decoded to
the enums of ``androidpublisher.schemas.enums`` when known and kept as plain
ints otherwise. Times are milliseconds since epoch encoded as strings.
"""

from typing import Optional

from androidpublisher.schemas.base import Schema
from androidpublisher.schemas.common import PageInfo, Price, TokenPagination
from androidpublisher.schemas.enums import (
    AcknowledgementState,
    CancelReason,
    CancelSurveyReason,
    ConsumptionState,
    PaymentState,
    PriceChangeState,
    ProductPurchaseType,
    PromotionType,
    PurchaseState,
    SubscriptionPurchaseType,
    VoidedReason,
    VoidedSource,
)


class ProductPurchase(Schema):
    acknowledgement_state: Optional[AcknowledgementState | int] = None
    consumption_state: Optional[ConsumptionState | int] = None
    developer_payload: Optional[str] = None
    kind: Optional[str] = None
    obfuscated_external_account_id: Optional[str] = None
    obfuscated_external_profile_id: Optional[str] = None
    order_id: Optional[str] = None
    product_id: Optional[str] = None
    purchase_state: Optional[PurchaseState | int] = None
    purchase_time_millis: Optional[str] = None
    purchase_token: Optional[str] = None
    purchase_type: Optional[ProductPurchaseType | int] = None
    quantity: Optional[int] = None
    region_code: Optional[str] = None


class ProductPurchasesAcknowledgeRequest(Schema):
    developer_payload: Optional[str] = None


class IntroductoryPriceInfo(Schema):
    introductory_price_amount_micros: Optional[str] = None
    introductory_price_currency_code: Optional[str] = None
    introductory_price_cycles: Optional[int] = None
    introductory_price_period: Optional[str] = None


class SubscriptionCancelSurveyResult(Schema):
    cancel_survey_reason: Optional[CancelSurveyReason | int] = None
    user_input_cancel_reason: Optional[str] = None


class SubscriptionPriceChange(Schema):
    new_price: Optional[Price] = None
    state: Optional[PriceChangeState | int] = None


class SubscriptionPurchase(Schema):
    acknowledgement_state: Optional[AcknowledgementState | int] = None
    auto_renewing: Optional[bool] = None
    auto_resume_time_millis: Optional[str] = None
    cancel_reason: Optional[CancelReason | int] = None
    cancel_survey_result: Optional[SubscriptionCancelSurveyResult] = None
    country_code: Optional[str] = None
    developer_payload: Optional[str] = None
    email_address: Optional[str] = None
    expiry_time_millis: Optional[str] = None
    external_account_id: Optional[str] = None
    family_name: Optional[str] = None
    given_name: Optional[str] = None
    introductory_price_info: Optional[IntroductoryPriceInfo] = None
    kind: Optional[str] = None
    linked_purchase_token: Optional[str] = None
    obfuscated_external_account_id: Optional[str] = None
    obfuscated_external_profile_id: Optional[str] = None
    order_id: Optional[str] = None
    payment_state: Optional[PaymentState | int] = None
    price_amount_micros: Optional[str] = None
    price_change: Optional[SubscriptionPriceChange] = None
    price_currency_code: Optional[str] = None
    profile_id: Optional[str] = None
    profile_name: Optional[str] = None
    promotion_code: Optional[str] = None
    promotion_type: Optional[PromotionType | int] = None
    purchase_type: Optional[SubscriptionPurchaseType | int] = None
    start_time_millis: Optional[str] = None
    user_cancellation_time_millis: Optional[str] = None


class SubscriptionPurchasesAcknowledgeRequest(Schema):
    developer_payload: Optional[str] = None


class SubscriptionDeferralInfo(Schema):
    desired_expiry_time_millis: Optional[str] = None
    expected_expiry_time_millis: Optional[str] = None


class SubscriptionPurchasesDeferRequest(Schema):
    deferral_info: Optional[SubscriptionDeferralInfo] = None


class SubscriptionPurchasesDeferResponse(Schema):
    new_expiry_time_millis: Optional[str] = None


class VoidedPurchase(Schema):
    kind: Optional[str] = None
    order_id: Optional[str] = None
    purchase_time_millis: Optional[str] = None
    purchase_token: Optional[str] = None
    voided_reason: Optional[VoidedReason | int] = None
    voided_source: Optional[VoidedSource | int] = None
    voided_time_millis: Optional[str] = None


class VoidedPurchasesListResponse(Schema):
    page_info: Optional[PageInfo] = None
    token_pagination: Optional[TokenPagination] = None
    voided_purchases: Optional[list[VoidedPurchase]] = None
