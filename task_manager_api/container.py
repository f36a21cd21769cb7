# task_manager_api/container.py

from dependency_injector import containers, providers

from task_manager_api.config import Settings
from task_manager_api.security import PasswordHasher, build_token_service


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Holds the process-wide collaborators that are expensive or stateful
    enough to share between requests. Request-scoped objects (DB sessions,
    services) are built by FastAPI dependencies instead.
    """

    # 1. Configuration
    # Loaded from Settings in build_container(); tests override it freely.
    config = providers.Configuration()

    # 2. Security
    password_hasher = providers.Singleton(
        PasswordHasher,
        rounds=config.BCRYPT_ROUNDS,
    )

    token_service = providers.Singleton(
        build_token_service,
        secret=config.JWT_SECRET,
        algorithm=config.JWT_ALGORITHM,
        expires_hours=config.JWT_EXPIRES_HOURS,
    )


def build_container(settings: Settings) -> Container:
    """
    Create a container configured from ``settings``.
    """
    container = Container()
    container.config.from_dict(settings.model_dump(mode="json"))
    return container


__all__ = ["Container", "build_container"]
