"""AI 応答テキストから推奨事項を取り出すユーティリティ."""
import re

_BULLET_PATTERN = re.compile(r"^[-•]\s?")
_NUMBER_PATTERN = re.compile(r"^\d+\.\s")

SYSTEM_PROMPT = (
    "Eres un asesor financiero. Devuelve EXACTAMENTE una lista de 5 recomendaciones "
    "en español, en texto plano, una por línea, sin numerar, sin prefacio ni "
    "explicación adicional."
)

NOT_CONFIGURED_MESSAGE = "Activa IA configurando AI_API_URL y AI_API_KEY"
NO_RESPONSE_MESSAGE = "IA sin respuesta; verifica API_URL, API_KEY y modelo"
ERROR_MESSAGE = "Error de IA; revisa configuración y conectividad"


def parse_recommendations(content: str | None) -> list[str]:
    """応答本文を1行1件の推奨事項に分割する.

    空行は除き、先頭の "-", "•", "1. " などの記号は取り除く。
    """
    if not content or not content.strip():
        return []

    recommendations = []
    for line in content.split("\n"):
        text = line.strip()
        if not text:
            continue
        text = _BULLET_PATTERN.sub("", text, count=1)
        text = _NUMBER_PATTERN.sub("", text, count=1)
        recommendations.append(text)
    return recommendations
