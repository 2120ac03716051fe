"""Exceptions raised by page objects and the fixture loader."""


class StorefrontError(Exception):
    """Base class for errors raised by this package."""


class ElementNotFoundError(StorefrontError):
    """An indexed element (cart row, product tile, button) does not exist."""

    def __init__(self, description: str, index: int):
        self.description = description
        self.index = index
        super().__init__(f"{description} at index {index} not found")


class UnknownCategoryError(StorefrontError):
    """A category name outside the storefront's top menu was requested."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Category "{name}" not found')


class CheckoutError(StorefrontError):
    """The checkout flow was started with unusable inputs."""


class MissingPaymentDetailsError(CheckoutError):
    """The chosen payment method needs details that were not supplied."""


class TestDataError(StorefrontError):
    """The fixture file could not be read or does not match the schema."""

    __test__ = False
