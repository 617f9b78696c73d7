from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.utils import timezone

MIN_YEAR_RELEASED = 1950

cover_image_url_validator = RegexValidator(
    regex=r"(^https://|/images/).+(\.png|\.jpg)$",
    message="A URL da capa deve começar com https:// ou /images/ e terminar em .png ou .jpg.",
    code="invalid_cover_image_url",
)


def next_year():
    return timezone.now().year + 1


def validate_year_released(value):
    """O ano de lançamento deve ser maior que 1950 e no máximo o ano que vem."""
    if value <= MIN_YEAR_RELEASED:
        raise ValidationError(
            "O ano de lançamento deve ser maior que %(min)s.",
            code="year_too_old",
            params={"min": MIN_YEAR_RELEASED},
        )
    if value > next_year():
        raise ValidationError(
            "O ano de lançamento não pode ser maior que %(max)s.",
            code="year_in_future",
            params={"max": next_year()},
        )
