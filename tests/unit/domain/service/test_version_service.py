"""Unit tests for VersionService."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from collab.config import VersionSettings
from collab.domain.error import NotFoundError, VersionConflictError
from collab.domain.model import DocumentVersion
from collab.domain.repository import VersionRepository
from collab.domain.service import VersionService
from collab.domain.value import AccountId, DocumentId, VersionId, VersionType
from collab.persistence.repository.inmemory import InMemoryVersionRepository
from tests.conftest import make_document
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class RacingVersionRepository(InMemoryVersionRepository):
    """Lets another writer claim the next number just before each of our adds."""

    def __init__(self, races: int) -> None:
        super().__init__()
        self.races = races
        self.attempts = 0

    async def add(self, version: DocumentVersion) -> DocumentVersion:
        self.attempts += 1
        if self.races > 0:
            self.races -= 1
            await super().add(
                version.model_copy(update={"id": VersionId(uuid4())})
            )
        return await super().add(version)


class AlwaysTakenVersionRepository(InMemoryVersionRepository):
    """Every insert collides."""

    def __init__(self) -> None:
        super().__init__()
        self.attempts = 0

    async def add(self, version: DocumentVersion) -> DocumentVersion:
        self.attempts += 1
        raise IntegrityError("Duplicate version number", None, Exception())


class TestCreateVersion:
    """Tests for create_version."""

    @pytest.mark.asyncio
    async def test_numbers_start_at_one_and_are_gapless(self, unit_env):
        """Versions are numbered 1, 2, 3 within a document."""
        # Arrange
        version_service = await unit_env.get(VersionService)
        document_id = DocumentId(uuid4())
        creator_id = AccountId(uuid4())

        # Act
        versions = [
            await version_service.create_version(
                document_id, creator_id, title=f"Draft {n}", content=f"<p>Draft {n}</p>"
            )
            for n in range(1, 4)
        ]

        # Assert
        assert [v.version_number for v in versions] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_numbering_is_per_document(self, unit_env):
        version_service = await unit_env.get(VersionService)
        creator_id = AccountId(uuid4())

        await version_service.create_version(
            DocumentId(uuid4()), creator_id, title="A", content="a"
        )
        other = await version_service.create_version(
            DocumentId(uuid4()), creator_id, title="B", content="b"
        )

        assert other.version_number == 1

    @pytest.mark.asyncio
    async def test_content_round_trips_exactly(self, unit_env):
        """Stored content is returned byte for byte."""
        version_service = await unit_env.get(VersionService)
        document_id = DocumentId(uuid4())
        content = '<h1>Results</h1>\n<p>α = 0.05 &amp; “quoted”</p>  '

        created = await version_service.create_version(
            document_id, AccountId(uuid4()), title="Results", content=content
        )
        fetched = await version_service.get_version(document_id, created.id)

        assert fetched.content == content
        assert fetched.word_count == 6

    @pytest.mark.asyncio
    async def test_lost_race_retries_with_next_number(self):
        """A taken number is re-read and the next one is claimed."""
        repo = RacingVersionRepository(races=1)
        version_service = VersionService(repo, VersionSettings(max_insert_attempts=3))
        document_id = DocumentId(uuid4())

        version = await version_service.create_version(
            document_id, AccountId(uuid4()), title="Mine", content="mine"
        )

        assert version.version_number == 2
        assert repo.attempts == 2
        numbers = sorted(v.version_number for v in await repo.find_by_document(document_id))
        assert numbers == [1, 2]

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        """Persistent collisions raise VersionConflictError."""
        repo = AlwaysTakenVersionRepository()
        version_service = VersionService(repo, VersionSettings(max_insert_attempts=3))

        with pytest.raises(VersionConflictError):
            await version_service.create_version(
                DocumentId(uuid4()), AccountId(uuid4()), title="T", content="c"
            )
        assert repo.attempts == 3


class TestGetVersion:
    """Tests for get_version."""

    @pytest.mark.asyncio
    async def test_unknown_version_raises_not_found(self, unit_env):
        version_service = await unit_env.get(VersionService)

        with pytest.raises(NotFoundError):
            await version_service.get_version(DocumentId(uuid4()), VersionId(uuid4()))

    @pytest.mark.asyncio
    async def test_version_of_another_document_raises_not_found(self, unit_env):
        version_service = await unit_env.get(VersionService)
        version = await version_service.create_version(
            DocumentId(uuid4()), AccountId(uuid4()), title="T", content="c"
        )

        with pytest.raises(NotFoundError):
            await version_service.get_version(DocumentId(uuid4()), version.id)


class TestRestoreVersion:
    """Tests for restore_version."""

    async def _seed(self, version_service, document_id, creator_id, count):
        return [
            await version_service.create_version(
                document_id, creator_id, title=f"V{n}", content=f"content {n}"
            )
            for n in range(1, count + 1)
        ]

    @pytest.mark.asyncio
    async def test_restore_appends_copy_and_keeps_history(self, unit_env):
        """Restoring v2 of v1..v5 appends v6 with v2's content."""
        # Arrange
        version_service = await unit_env.get(VersionService)
        version_repo = await unit_env.get(VersionRepository)
        creator_id = AccountId(uuid4())
        document = make_document(creator_id, title="V5", content="content 5")
        seeded = await self._seed(version_service, document.id, creator_id, 5)

        # Act
        restored = await version_service.restore_version(
            document, seeded[1], creator_id
        )

        # Assert
        assert restored.version_number == 6
        assert restored.version_type == VersionType.RESTORE
        assert restored.content == "content 2"
        assert restored.title == "V2"
        assert restored.restored_from_version_id == seeded[1].id
        assert restored.description == "Restored from version 2"

        history = await version_repo.find_by_document(document.id)
        assert [v.version_number for v in history] == [6, 5, 4, 3, 2, 1]
        assert [v.content for v in history[1:]] == [
            "content 5",
            "content 4",
            "content 3",
            "content 2",
            "content 1",
        ]

    @pytest.mark.asyncio
    async def test_restoring_twice_appends_two_versions(self, unit_env):
        version_service = await unit_env.get(VersionService)
        creator_id = AccountId(uuid4())
        document = make_document(creator_id, title="V3", content="content 3")
        seeded = await self._seed(version_service, document.id, creator_id, 3)

        first = await version_service.restore_version(document, seeded[0], creator_id)
        # The editor now shows the restored content
        document = document.model_copy(
            update={"title": first.title, "content": first.content}
        )
        second = await version_service.restore_version(
            document, seeded[0], creator_id
        )

        assert (first.version_number, second.version_number) == (4, 5)
        assert first.content == second.content == "content 1"

    @pytest.mark.asyncio
    async def test_unsaved_live_changes_are_backed_up_first(self, unit_env):
        """Live content that differs from the current version becomes an AUTO version."""
        version_service = await unit_env.get(VersionService)
        version_repo = await unit_env.get(VersionRepository)
        creator_id = AccountId(uuid4())
        document = make_document(creator_id, title="V2", content="unsaved edits")
        seeded = await self._seed(version_service, document.id, creator_id, 2)

        restored = await version_service.restore_version(
            document, seeded[0], creator_id
        )

        history = await version_repo.find_by_document(document.id)
        backup = history[1]
        assert backup.version_number == 3
        assert backup.version_type == VersionType.AUTO
        assert backup.content == "unsaved edits"
        assert backup.description == "Backup before restoring version 1"
        assert restored.version_number == 4

    @pytest.mark.asyncio
    async def test_no_backup_without_live_content(self, unit_env):
        version_service = await unit_env.get(VersionService)
        creator_id = AccountId(uuid4())
        document = make_document(creator_id, content=None)
        seeded = await self._seed(version_service, document.id, creator_id, 2)

        restored = await version_service.restore_version(
            document, seeded[0], creator_id
        )

        assert restored.version_number == 3

    @pytest.mark.asyncio
    async def test_restore_of_another_documents_version_raises_not_found(
        self, unit_env
    ):
        version_service = await unit_env.get(VersionService)
        version_repo = await unit_env.get(VersionRepository)
        creator_id = AccountId(uuid4())
        document = make_document(creator_id, content="live")
        other = make_document(creator_id, content="other")
        [foreign] = await self._seed(version_service, other.id, creator_id, 1)

        with pytest.raises(NotFoundError):
            await version_service.restore_version(document, foreign, creator_id)
        assert await version_repo.find_by_document(document.id) == []
