from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from language.registry import RegistryError
from language.rfc4646 import WellFormednessError, parse
from language.serializers import LanguageTagSerializer

TRUE_VALUES = ("1", "true", "yes", "on")


@require_GET
def parse_tag(request: HttpRequest, tag: str):
    validate = request.GET.get("validate", "").lower() in TRUE_VALUES
    try:
        lang_tag = parse(tag, validate=validate)
    except WellFormednessError as e:
        return JsonResponse(
            {"error": "ill_formed", "tag": e.tag, "detail": str(e)}, status=400)
    except RegistryError as e:
        return JsonResponse({
            "error": "unregistered",
            "tag": e.tag,
            "subtag_type": e.subtag_type.label,
            "subtag": e.subtag,
            "detail": str(e),
        }, status=400)
    return JsonResponse(LanguageTagSerializer(lang_tag).data)
