import json
import logging
import time

import httpx

from simconnect.core.config import get_settings
from simconnect.schemas.catalog import Country
from simconnect.services.catalog import CatalogStore


settings = get_settings()
logger = logging.getLogger(__name__)

CONTEXT_OPERATOR_LIMIT = 10
CONTEXT_PLAN_LIMIT = 5

NOT_CONFIGURED_REPLY = "API Key not configured."
EMPTY_REPLY = "Sorry, I couldn't generate a recommendation at this time."
OFFLINE_REPLY = "Sorry, I am currently offline. Please try again later."

SYSTEM_PROMPT = """
You are the AI assistant for "Global SIM Connect".
Your goal is to recommend the best SIM cards or mobile plans for travelers based on the user's query.

You have access to the following countries in the database:
{countries}

And this relevant data context (Operators/Plans):
{context}

Keep your answers concise, friendly, and practical.
If the user asks about a country we have data for, recommend specific plans from the context.
If the user asks about a country we don't have, provide general advice for that region.
"""


def build_context(store: CatalogStore) -> str:
    operators = store.list_operators()[:CONTEXT_OPERATOR_LIMIT]
    plans = store.list_plans()[:CONTEXT_PLAN_LIMIT]
    return json.dumps(
        {
            "operators": [{"name": op.name, "coverage": op.coverage} for op in operators],
            "example_plans": [
                {"name": plan.name, "price": float(plan.price), "data": plan.data_gb}
                for plan in plans
            ],
        },
        ensure_ascii=False,
    )


def build_system_prompt(countries: list[Country], context: str) -> str:
    names = ", ".join(country.name_en for country in countries)
    return SYSTEM_PROMPT.format(countries=json.dumps(names, ensure_ascii=False), context=context)


def extract_reply_text(response: dict) -> str:
    candidates = response.get("candidates") if isinstance(response, dict) else None
    if not isinstance(candidates, list) or not candidates:
        return ""
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    texts = [str(part.get("text") or "") for part in parts if isinstance(part, dict)]
    return "".join(texts).strip()


class AdvisorApiError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None, raw: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.raw = raw


class AdvisorClient:
    def __init__(self):
        self.base_url = str(settings.gemini_base_url).rstrip("/")
        self.api_key = settings.gemini_api_key
        self.model = settings.gemini_model
        self.timeout = settings.gemini_timeout_seconds
        self.retry_count = settings.gemini_retry_count
        self.max_output_tokens = settings.gemini_max_output_tokens

    @property
    def configured(self) -> bool:
        return bool(str(self.api_key or "").strip())

    def _headers(self) -> dict:
        return {
            "x-goog-api-key": str(self.api_key or ""),
            "Content-Type": "application/json",
        }

    def _extract_error_message(self, response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            data = {}
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict):
                message = error.get("message")
                if isinstance(message, str) and message.strip():
                    return message.strip()
            if isinstance(error, str) and error.strip():
                return error.strip()
        text = (response.text or "").strip()
        return text[:300] if text else f"HTTP {response.status_code}"

    def _request(self, method: str, path: str, payload: dict | None = None) -> dict:
        url = f"{self.base_url}{path}"
        last_exc = None
        for attempt in range(self.retry_count + 1):
            start = time.time()
            try:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.request(method, url, json=payload, headers=self._headers())
                duration_ms = round((time.time() - start) * 1000, 2)
                logger.info("Gemini API %s %s status=%s duration=%sms", method, path, response.status_code, duration_ms)
                if response.status_code >= 500 and attempt < self.retry_count:
                    time.sleep(0.5 * (attempt + 1))
                    continue
                if response.status_code >= 400:
                    message = self._extract_error_message(response)
                    raise AdvisorApiError(message, status_code=response.status_code, raw=response.text)
                try:
                    return response.json()
                except ValueError as exc:
                    raise AdvisorApiError("Gemini returned invalid JSON response.", status_code=response.status_code, raw=response.text) from exc
            except AdvisorApiError as exc:
                last_exc = exc
                # Bad key or bad request will not improve on retry; rate limits might.
                if exc.status_code is not None and exc.status_code < 500 and exc.status_code != 429:
                    raise last_exc
                if attempt < self.retry_count:
                    time.sleep(0.5 * (attempt + 1))
                    continue
                raise last_exc
            except (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError) as exc:
                last_exc = AdvisorApiError("Unable to reach the advisory service.", raw=str(exc))
                if attempt < self.retry_count:
                    time.sleep(0.5 * (attempt + 1))
                    continue
                raise last_exc
        raise last_exc or AdvisorApiError("Advisory request failed.")

    def ask(self, query: str, countries: list[Country], context: str) -> str:
        if not self.configured:
            return NOT_CONFIGURED_REPLY
        payload = {
            "systemInstruction": {"parts": [{"text": build_system_prompt(countries, context)}]},
            "contents": [{"role": "user", "parts": [{"text": query}]}],
            "generationConfig": {"maxOutputTokens": self.max_output_tokens},
        }
        response = self._request("POST", f"/models/{self.model}:generateContent", payload)
        return extract_reply_text(response) or EMPTY_REPLY
