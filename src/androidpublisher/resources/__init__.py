# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from .base import MethodBuilder
from .edits import (
    EditApkAddexternallyhostedCall,
    EditApkListCall,
    EditApkUploadCall,
    EditBundleListCall,
    EditBundleUploadCall,
    EditCommitCall,
    EditDeleteCall,
    EditDeobfuscationfileUploadCall,
    EditDetailGetCall,
    EditDetailPatchCall,
    EditDetailUpdateCall,
    EditExpansionfileGetCall,
    EditExpansionfilePatchCall,
    EditExpansionfileUpdateCall,
    EditExpansionfileUploadCall,
    EditGetCall,
    EditImageDeleteallCall,
    EditImageDeleteCall,
    EditImageListCall,
    EditImageUploadCall,
    EditInsertCall,
    EditListingDeleteallCall,
    EditListingDeleteCall,
    EditListingGetCall,
    EditListingListCall,
    EditListingPatchCall,
    EditListingUpdateCall,
    EditMethods,
    EditTesterGetCall,
    EditTesterPatchCall,
    EditTesterUpdateCall,
    EditTrackGetCall,
    EditTrackListCall,
    EditTrackPatchCall,
    EditTrackUpdateCall,
    EditValidateCall,
)
from .inappproducts import (
    InappproductDeleteCall,
    InappproductGetCall,
    InappproductInsertCall,
    InappproductListCall,
    InappproductMethods,
    InappproductPatchCall,
    InappproductUpdateCall,
)
from .internalappsharing import (
    InternalappsharingartifactMethods,
    InternalappsharingartifactUploadapkCall,
    InternalappsharingartifactUploadbundleCall,
)
from .orders import OrderMethods, OrderRefundCall
from .purchases import (
    PurchaseMethods,
    PurchaseProductAcknowledgeCall,
    PurchaseProductGetCall,
    PurchaseSubscriptionAcknowledgeCall,
    PurchaseSubscriptionCancelCall,
    PurchaseSubscriptionDeferCall,
    PurchaseSubscriptionGetCall,
    PurchaseSubscriptionRefundCall,
    PurchaseSubscriptionRevokeCall,
    PurchaseVoidedpurchaseListCall,
)
from .reviews import ReviewGetCall, ReviewListCall, ReviewMethods, ReviewReplyCall
from .systemapks import (
    SystemapkMethods,
    SystemapkVariantCreateCall,
    SystemapkVariantDownloadCall,
    SystemapkVariantGetCall,
    SystemapkVariantListCall,
)

__all__ = [
    # Method builders
    "MethodBuilder",
    "EditMethods",
    "InappproductMethods",
    "InternalappsharingartifactMethods",
    "OrderMethods",
    "PurchaseMethods",
    "ReviewMethods",
    "SystemapkMethods",
    # edits
    "EditApkAddexternallyhostedCall",
    "EditApkListCall",
    "EditApkUploadCall",
    "EditBundleListCall",
    "EditBundleUploadCall",
    "EditCommitCall",
    "EditDeleteCall",
    "EditDeobfuscationfileUploadCall",
    "EditDetailGetCall",
    "EditDetailPatchCall",
    "EditDetailUpdateCall",
    "EditExpansionfileGetCall",
    "EditExpansionfilePatchCall",
    "EditExpansionfileUpdateCall",
    "EditExpansionfileUploadCall",
    "EditGetCall",
    "EditImageDeleteallCall",
    "EditImageDeleteCall",
    "EditImageListCall",
    "EditImageUploadCall",
    "EditInsertCall",
    "EditListingDeleteallCall",
    "EditListingDeleteCall",
    "EditListingGetCall",
    "EditListingListCall",
    "EditListingPatchCall",
    "EditListingUpdateCall",
    "EditTesterGetCall",
    "EditTesterPatchCall",
    "EditTesterUpdateCall",
    "EditTrackGetCall",
    "EditTrackListCall",
    "EditTrackPatchCall",
    "EditTrackUpdateCall",
    "EditValidateCall",
    # inappproducts
    "InappproductDeleteCall",
    "InappproductGetCall",
    "InappproductInsertCall",
    "InappproductListCall",
    "InappproductPatchCall",
    "InappproductUpdateCall",
    # internalappsharingartifacts
    "InternalappsharingartifactUploadapkCall",
    "InternalappsharingartifactUploadbundleCall",
    # orders
    "OrderRefundCall",
    # purchases
    "PurchaseProductAcknowledgeCall",
    "PurchaseProductGetCall",
    "PurchaseSubscriptionAcknowledgeCall",
    "PurchaseSubscriptionCancelCall",
    "PurchaseSubscriptionDeferCall",
    "PurchaseSubscriptionGetCall",
    "PurchaseSubscriptionRefundCall",
    "PurchaseSubscriptionRevokeCall",
    "PurchaseVoidedpurchaseListCall",
    # reviews
    "ReviewGetCall",
    "ReviewListCall",
    "ReviewReplyCall",
    # systemapks
    "SystemapkVariantCreateCall",
    "SystemapkVariantDownloadCall",
    "SystemapkVariantGetCall",
    "SystemapkVariantListCall",
]
