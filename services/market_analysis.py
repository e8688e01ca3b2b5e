# services/market_analysis.py
"""
AI-powered rental market analysis.

Sends the property attributes to Claude and expects a JSON object with the
estimated rent, a market-trends write-up and comparable properties. Every
failure is wrapped into ``{success: false, error}``; nothing is retried.
"""
import json
import logging
import os

from anthropic import Anthropic
from dotenv import load_dotenv
from pydantic import ValidationError

from schemas import MarketAnalysis, MarketAnalysisRequest, MarketAnalysisResult

load_dotenv()

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Échec de l'analyse des données du marché : "

SYSTEM_PROMPT = (
     "You are an expert real estate analyst specializing in rental market trends. "
     "Answer with a single JSON object and nothing else."
)


def build_prompt(request: MarketAnalysisRequest) -> str:
     return f"""You will analyze the provided property details and provide an estimated monthly rent, an analysis of current rental market trends in the area, and a description of comparable properties and their rental rates.

Property Type: {request.property_type}
Location: {request.location}
Bedrooms: {request.bedrooms}
Bathrooms: {request.bathrooms}
Square Footage: {request.square_footage}
Amenities: {request.amenities}

Return JSON with exactly these keys:
{{"estimatedRent": <number, monthly rent>, "marketTrends": "<analysis>", "comparableProperties": "<comparables and their rents>"}}"""


def _strip_fences(raw: str) -> str:
     raw = raw.strip()
     if raw.startswith("```"):
          raw = raw.split("```")[1]
          if raw.startswith("json"):
               raw = raw[4:]
     return raw.strip()


def _client() -> Anthropic:
     api_key = os.getenv("ANTHROPIC_API_KEY")
     if not api_key:
          raise RuntimeError("ANTHROPIC_API_KEY is not set")
     return Anthropic(api_key=api_key)


def analyze_rental_market(request: MarketAnalysisRequest, client=None) -> MarketAnalysisResult:
     """
     Run the market analysis.

     Args:
          request: Property attributes
          client: Anthropic-compatible client; built from ANTHROPIC_API_KEY when omitted

     Returns:
          MarketAnalysisResult with ``data`` on success or ``error`` on failure
     """
     try:
          client = client or _client()
          prompt = build_prompt(request)
          logger.info("Sending %d char market analysis prompt", len(prompt))
          response = client.messages.create(
               model=os.getenv("CLAUDE_MODEL", "claude-sonnet-4-6"),
               max_tokens=2000,
               system=SYSTEM_PROMPT,
               messages=[{"role": "user", "content": prompt}],
          )
          raw = _strip_fences(response.content[0].text)
          data = MarketAnalysis.model_validate(json.loads(raw))
          return MarketAnalysisResult(success=True, data=data)
     except json.JSONDecodeError as e:
          logger.error("Market analysis returned invalid JSON: %s", e)
          return MarketAnalysisResult(success=False, error=ERROR_PREFIX + "réponse invalide du modèle.")
     except ValidationError as e:
          logger.error("Market analysis returned an unexpected shape: %s", e)
          return MarketAnalysisResult(success=False, error=ERROR_PREFIX + "réponse incomplète du modèle.")
     except Exception as e:
          logger.error("Market analysis failed: %s", e)
          message = str(e) or "Une erreur inconnue est survenue."
          return MarketAnalysisResult(success=False, error=ERROR_PREFIX + message)
