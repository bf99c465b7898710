"""
Change User Role Use Case

Handles an admin changing another account's role.
"""

from uuid import UUID

from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.app.use_cases.auth.dtos import UserInfo
from feedback_service.domain.entities import UserRole
from feedback_service.libs.result import Error, Result, Return
from .dtos import ChangeRoleResponse


class ChangeRoleUseCase:
    """
    Use case for changing a user's role.

    Business Rules:
    - Caller is already gated to ADMIN by the API layer
    - Role must be ADMIN or USER
    - Target user must exist
    - Self-demotion is allowed
    - Existing JWTs keep the old role until they expire
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, target_user_id: UUID, new_role: str) -> Result[ChangeRoleResponse]:
        """
        Execute change role use case.

        Args:
            target_user_id: User ID whose role is being changed
            new_role: New role to assign (ADMIN/USER)

        Returns:
            Result with updated user info, or Error
        """
        try:
            role = UserRole(new_role)
        except ValueError:
            return Return.err(
                Error("INVALID_ROLE", "Valid role (ADMIN or USER) is required")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.role = role
            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(
                ChangeRoleResponse(
                    message="User role updated successfully",
                    user=UserInfo(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        role=user.role.value,
                    ),
                )
            )
