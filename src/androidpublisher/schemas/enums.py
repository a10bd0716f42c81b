# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from enum import IntEnum, StrEnum


class PurchaseState(IntEnum):
    PURCHASED = 0
    CANCELED = 1
    PENDING = 2


class ConsumptionState(IntEnum):
    YET_TO_BE_CONSUMED = 0
    CONSUMED = 1


class AcknowledgementState(IntEnum):
    YET_TO_BE_ACKNOWLEDGED = 0
    ACKNOWLEDGED = 1


class ProductPurchaseType(IntEnum):
    TEST = 0
    PROMO = 1
    REWARDED = 2


class SubscriptionPurchaseType(IntEnum):
    TEST = 0
    PROMO = 1


class PaymentState(IntEnum):
    PAYMENT_PENDING = 0
    PAYMENT_RECEIVED = 1
    FREE_TRIAL = 2
    PENDING_DEFERRED_UPGRADE_DOWNGRADE = 3


class CancelReason(IntEnum):
    USER_CANCELED = 0
    SYSTEM_CANCELED = 1
    REPLACED = 2
    DEVELOPER_CANCELED = 3


class CancelSurveyReason(IntEnum):
    OTHER = 0
    NOT_USED_ENOUGH = 1
    TECHNICAL_ISSUES = 2
    COST_RELATED = 3
    FOUND_BETTER_APP = 4


class PromotionType(IntEnum):
    ONE_TIME_CODE = 0
    VANITY_CODE = 1


class PriceChangeState(IntEnum):
    OUTSTANDING = 0
    ACCEPTED = 1


class VoidedSource(IntEnum):
    USER = 0
    DEVELOPER = 1
    GOOGLE = 2


class VoidedReason(IntEnum):
    OTHER = 0
    REMORSE = 1
    NOT_RECEIVED = 2
    DEFECTIVE = 3
    ACCIDENTAL_PURCHASE = 4
    FRAUD = 5
    FRIENDLY_FRAUD = 6
    CHARGEBACK = 7


class VoidedPurchaseType(IntEnum):
    """Value of the ``type`` query parameter of voided purchases list."""

    IN_APP_ONLY = 0
    IN_APP_AND_SUBSCRIPTIONS = 1


class TrackReleaseStatus(StrEnum):
    STATUS_UNSPECIFIED = "statusUnspecified"
    DRAFT = "draft"
    IN_PROGRESS = "inProgress"
    HALTED = "halted"
    COMPLETED = "completed"


class AppImageType(StrEnum):
    PHONE_SCREENSHOTS = "phoneScreenshots"
    SEVEN_INCH_SCREENSHOTS = "sevenInchScreenshots"
    TEN_INCH_SCREENSHOTS = "tenInchScreenshots"
    TV_SCREENSHOTS = "tvScreenshots"
    WEAR_SCREENSHOTS = "wearScreenshots"
    ICON = "icon"
    FEATURE_GRAPHIC = "featureGraphic"
    TV_BANNER = "tvBanner"


class ExpansionFileType(StrEnum):
    MAIN = "main"
    PATCH = "patch"


class DeobfuscationFileType(StrEnum):
    PROGUARD = "proguard"
    NATIVE_CODE = "nativeCode"
