from polyfactory.factories.pydantic_factory import ModelFactory

from restapi.schemas import User


class UserFactory(ModelFactory[User]):
    __model__ = User

    @classmethod
    def email(cls) -> str:
        return cls.__faker__.email()

    @classmethod
    def name(cls) -> str:
        return cls.__faker__.name()
