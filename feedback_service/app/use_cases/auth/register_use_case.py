from sqlalchemy.exc import IntegrityError

from feedback_service.app.services.password_hasher import hash_password
from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.domain.entities import User, UserRole
from feedback_service.libs.result import Error, Result, Return
from .dtos import RegisterCommand, RegisterResponse, UserInfo
from .password_policy import validate_password


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate password length
    2. Check if email already exists (the unique index settles races)
    3. Hash password with bcrypt
    4. Create User with role=USER
    5. Commit and return the public user fields
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Returns:
            Result[RegisterResponse], or Error(EMAIL_ALREADY_EXISTS) if the
            email is taken, or Error(INVALID_PASSWORD)
        """
        password_validation = validate_password(command.password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        email_taken = Error("EMAIL_ALREADY_EXISTS", "Email already registered")

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(email_taken)

            user = User(
                name=command.name,
                email=command.email,
                password_hash=hash_password(command.password),
                role=UserRole.USER,
            )
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # Lost a race with a concurrent registration of the same email
                await self.uow.rollback()
                return Return.err(email_taken)

            return Return.ok(
                RegisterResponse(
                    message="User registered successfully",
                    user=UserInfo(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        role=user.role.value,
                    ),
                )
            )
