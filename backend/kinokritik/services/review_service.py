import logging
from typing import Optional
from openai import OpenAI
from kinokritik.core.config import get_settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "Du bist ein arroganter, herablassender Filmkritiker, der den Massengeschmack verachtet. "
    "Deine Kritiken strotzen vor bildungsbürgerlichen Anspielungen und beißendem Sarkasmus, "
    "bleiben dabei aber stets unterhaltsam. "
    "Schreibe die gesamte Rezension auf Deutsch und halte sie unter 1000 Zeichen."
)

USER_PROMPT_TEMPLATE = 'Schreibe eine humoristische Rezension des Films "{title}" von "{regisseur}".'


class ReviewService:
    """Generates satirical movie reviews with the OpenAI Chat Completions API"""

    def __init__(self, client: Optional[OpenAI] = None):
        self.settings = get_settings()
        self._client = client

    @property
    def client(self) -> OpenAI:
        # A missing OPENAI_API_KEY surfaces from generate_movie_review
        if self._client is None:
            self._client = OpenAI(api_key=self.settings.OPENAI_API_KEY)
        return self._client

    def generate_movie_review(self, title: str, regisseur: str) -> str:
        """Return the review text; provider errors propagate to the caller"""
        logger.info(f"Generating review for '{title}' by '{regisseur}'")
        completion = self.client.chat.completions.create(
            model=self.settings.OPENAI_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": USER_PROMPT_TEMPLATE.format(title=title, regisseur=regisseur)},
            ],
            temperature=self.settings.REVIEW_TEMPERATURE,
            max_tokens=self.settings.REVIEW_MAX_TOKENS,
        )
        content = completion.choices[0].message.content
        return (content or "").strip()
