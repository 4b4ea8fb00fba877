from application.constants import CONFIRMATION, LOGIN, MAX, OPCO, ORIGINAL_PASSWORD, PASSWORD, START
from application.services.base import Service
from domain.schemas import User
from infrastructure.transport.base import HttpMethod


class UsersService(Service):
    """
    Account management. Most calls require the authenticated user to be an
    Administrator (within an opco) or Super (system-wide).
    """

    def all(self) -> list[User]:
        return self.request("users").fetch_list(User)

    def get(self, login: str) -> User:
        return self.request("user").add_parameter(LOGIN, login).fetch_one(User)

    def create(
        self,
        login: str,
        email: str,
        password: str,
        confirmation: str,
        opco: str | None = None,
    ) -> User:
        return (
            self.request("user", HttpMethod.POST)
            .add_parameter(LOGIN, login)
            .add_parameter(PASSWORD, password)
            .add_parameter(CONFIRMATION, confirmation)
            .add_parameter("email", email)
            .add_parameter(OPCO, opco)
            .fetch_one(User)
        )

    def update_email(self, login: str, email: str) -> User:
        return self.request("user/email", HttpMethod.PUT).add_parameter(LOGIN, login).add_parameter("email", email).fetch_one(User)

    def update_password(self, login: str, original: str, password: str, confirmation: str) -> User:
        return (
            self.request("user/password", HttpMethod.PUT)
            .add_parameter(LOGIN, login)
            .add_parameter(ORIGINAL_PASSWORD, original)
            .add_parameter(PASSWORD, password)
            .add_parameter(CONFIRMATION, confirmation)
            .fetch_one(User)
        )

    def update(self, user: User) -> User:
        """Submit email and, when set on the instance, a new password + confirmation."""
        return (
            self.request("user", HttpMethod.PUT)
            .add_parameter(LOGIN, user.login)
            .add_parameter("email", user.email)
            .add_parameter(PASSWORD, user.password)
            .add_parameter(CONFIRMATION, user.password_confirmation)
            .fetch_one(User)
        )

    def add_role(self, user: User, role: str) -> None:
        self.request("role/user", HttpMethod.PUT).add_parameter("role", role).add_parameter(LOGIN, user.login).send()

    def remove_role(self, user: User, role: str) -> None:
        self.request("role/user", HttpMethod.DELETE).add_parameter("role", role).add_parameter(LOGIN, user.login).send()

    def enable(self, user: User) -> User:
        return self.request("user/enable", HttpMethod.PUT).add_parameter(LOGIN, user.login).fetch_one(User)

    def disable(self, user: User) -> User:
        """Disabled accounts can no longer authenticate."""
        return self.request("user/disable", HttpMethod.PUT).add_parameter(LOGIN, user.login).fetch_one(User)

    def send_message(self, to: User, message: str, subject: str | None = None) -> None:
        (
            self.request("user/message", HttpMethod.POST)
            .add_parameter("to", to.login)
            .add_parameter("subject", subject)
            .add_parameter("message", message)
            .send()
        )

    def forgot_password(self, email: str) -> None:
        """Have the server email a password reset to the account with this address."""
        self.request("user/forgot", HttpMethod.PUT).add_parameter("email", email).send()

    def history(self, user: User, start: int = 0, max_results: int = 100) -> list[str]:
        return (
            self.request("user/history")
            .add_parameter(LOGIN, user.login)
            .add_parameter(START, start)
            .add_parameter(MAX, max_results)
            .fetch_strings()
        )
