from dishka import Provider as DishkaProvider


class Provider(DishkaProvider):
    """Base for all ninlink DI providers."""

    pass
