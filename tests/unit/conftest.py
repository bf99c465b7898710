import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()
    uow.users.list_with_response_counts = AsyncMock(return_value=[])

    uow.feedback_templates = MagicMock()
    uow.feedback_templates.create = AsyncMock(side_effect=lambda template: template)
    uow.feedback_templates.get_by_id = AsyncMock()
    uow.feedback_templates.list_with_response_counts = AsyncMock(return_value=[])
    uow.feedback_templates.list_active = AsyncMock(return_value=[])
    uow.feedback_templates.delete = AsyncMock()

    uow.feedback_responses = MagicMock()
    uow.feedback_responses.create = AsyncMock(side_effect=lambda response: response)
    uow.feedback_responses.list_all = AsyncMock(return_value=[])
    uow.feedback_responses.list_by_user_id = AsyncMock(return_value=[])
    uow.feedback_responses.delete_by_template_id = AsyncMock(return_value=0)
    uow.feedback_responses.delete_by_user_id = AsyncMock(return_value=0)
    return uow
