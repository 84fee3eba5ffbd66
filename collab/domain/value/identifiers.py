"""Strongly typed identifiers for collaboration domain entities.

Using NewType prevents mixing up the ids of documents, accounts and the
records that hang off them.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
DocumentId = NewType("DocumentId", UUID)
CollaboratorId = NewType("CollaboratorId", UUID)
InvitationId = NewType("InvitationId", UUID)
NotificationId = NewType("NotificationId", UUID)
VersionId = NewType("VersionId", UUID)
