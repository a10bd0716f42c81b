# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from .base import Schema
from .common import PageInfo, Price, Timestamp, TokenPagination
from .edits import (
    Apk,
    ApkBinary,
    ApksAddExternallyHostedRequest,
    ApksAddExternallyHostedResponse,
    ApksListResponse,
    AppDetails,
    AppEdit,
    Bundle,
    BundlesListResponse,
    CountryTargeting,
    DeobfuscationFile,
    DeobfuscationFilesUploadResponse,
    ExpansionFile,
    ExpansionFilesUploadResponse,
    ExternallyHostedApk,
    Image,
    ImagesDeleteAllResponse,
    ImagesListResponse,
    ImagesUploadResponse,
    Listing,
    ListingsListResponse,
    LocalizedText,
    Testers,
    Track,
    TrackRelease,
    TracksListResponse,
    UsesPermission,
)
from .enums import (
    AcknowledgementState,
    AppImageType,
    CancelReason,
    CancelSurveyReason,
    ConsumptionState,
    DeobfuscationFileType,
    ExpansionFileType,
    PaymentState,
    PriceChangeState,
    ProductPurchaseType,
    PromotionType,
    PurchaseState,
    SubscriptionPurchaseType,
    TrackReleaseStatus,
    VoidedPurchaseType,
    VoidedReason,
    VoidedSource,
)
from .inappproducts import InAppProduct, InAppProductListing, InappproductsListResponse
from .purchases import (
    IntroductoryPriceInfo,
    ProductPurchase,
    ProductPurchasesAcknowledgeRequest,
    SubscriptionCancelSurveyResult,
    SubscriptionDeferralInfo,
    SubscriptionPriceChange,
    SubscriptionPurchase,
    SubscriptionPurchasesAcknowledgeRequest,
    SubscriptionPurchasesDeferRequest,
    SubscriptionPurchasesDeferResponse,
    VoidedPurchase,
    VoidedPurchasesListResponse,
)
from .reviews import (
    Comment,
    DeveloperComment,
    DeviceMetadata,
    Review,
    ReviewReplyResult,
    ReviewsListResponse,
    ReviewsReplyRequest,
    ReviewsReplyResponse,
    UserComment,
)
from .sharing import DeviceSpec, InternalAppSharingArtifact, SystemApksListResponse, Variant

__all__ = [
    "Schema",
    # Common
    "PageInfo",
    "Price",
    "Timestamp",
    "TokenPagination",
    # Edits
    "Apk",
    "ApkBinary",
    "ApksAddExternallyHostedRequest",
    "ApksAddExternallyHostedResponse",
    "ApksListResponse",
    "AppDetails",
    "AppEdit",
    "Bundle",
    "BundlesListResponse",
    "CountryTargeting",
    "DeobfuscationFile",
    "DeobfuscationFilesUploadResponse",
    "ExpansionFile",
    "ExpansionFilesUploadResponse",
    "ExternallyHostedApk",
    "Image",
    "ImagesDeleteAllResponse",
    "ImagesListResponse",
    "ImagesUploadResponse",
    "Listing",
    "ListingsListResponse",
    "LocalizedText",
    "Testers",
    "Track",
    "TrackRelease",
    "TracksListResponse",
    "UsesPermission",
    # In-app products
    "InAppProduct",
    "InAppProductListing",
    "InappproductsListResponse",
    # Purchases
    "IntroductoryPriceInfo",
    "ProductPurchase",
    "ProductPurchasesAcknowledgeRequest",
    "SubscriptionCancelSurveyResult",
    "SubscriptionDeferralInfo",
    "SubscriptionPriceChange",
    "SubscriptionPurchase",
    "SubscriptionPurchasesAcknowledgeRequest",
    "SubscriptionPurchasesDeferRequest",
    "SubscriptionPurchasesDeferResponse",
    "VoidedPurchase",
    "VoidedPurchasesListResponse",
    # Reviews
    "Comment",
    "DeveloperComment",
    "DeviceMetadata",
    "Review",
    "ReviewReplyResult",
    "ReviewsListResponse",
    "ReviewsReplyRequest",
    "ReviewsReplyResponse",
    "UserComment",
    # Internal sharing and system apks
    "DeviceSpec",
    "InternalAppSharingArtifact",
    "SystemApksListResponse",
    "Variant",
    # Enums
    "AcknowledgementState",
    "AppImageType",
    "CancelReason",
    "CancelSurveyReason",
    "ConsumptionState",
    "DeobfuscationFileType",
    "ExpansionFileType",
    "PaymentState",
    "PriceChangeState",
    "ProductPurchaseType",
    "PromotionType",
    "PurchaseState",
    "SubscriptionPurchaseType",
    "TrackReleaseStatus",
    "VoidedPurchaseType",
    "VoidedReason",
    "VoidedSource",
]
