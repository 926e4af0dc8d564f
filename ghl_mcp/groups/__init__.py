"""
GoHighLevel capability groups.

Each group owns a disjoint slice of tool names. GROUP_CLASSES fixes the
registration order, which is also the order tools appear in the catalog.
"""

from typing import List

from ..client import GHLApiClient
from .base import CapabilityGroup, Endpoint
from .contacts import ContactGroup
from .conversations import ConversationGroup
from .blog import BlogGroup
from .opportunities import OpportunityGroup
from .calendar import CalendarGroup
from .email import EmailGroup
from .locations import LocationGroup
from .email_isv import EmailISVGroup
from .social_media import SocialMediaGroup
from .media import MediaGroup
from .objects import ObjectGroup
from .associations import AssociationGroup
from .custom_fields_v2 import CustomFieldV2Group
from .workflows import WorkflowGroup
from .surveys import SurveyGroup
from .store import StoreGroup
from .products import ProductGroup
from .payments import PaymentGroup
from .invoices import InvoiceGroup

GROUP_CLASSES = (
    ContactGroup,
    ConversationGroup,
    BlogGroup,
    OpportunityGroup,
    CalendarGroup,
    EmailGroup,
    LocationGroup,
    EmailISVGroup,
    SocialMediaGroup,
    MediaGroup,
    ObjectGroup,
    AssociationGroup,
    CustomFieldV2Group,
    WorkflowGroup,
    SurveyGroup,
    StoreGroup,
    ProductGroup,
    PaymentGroup,
    InvoiceGroup,
)


def build_groups(client: GHLApiClient) -> List[CapabilityGroup]:
    """Construct every capability group around the shared backend client."""
    return [cls(client) for cls in GROUP_CLASSES]


__all__ = ["CapabilityGroup", "Endpoint", "GROUP_CLASSES", "build_groups"]
