import os
import logging
from google import genai
from typing import List
from dotenv import load_dotenv
from langchain_core.documents import Document
from langchain_core.prompts import PromptTemplate
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

load_dotenv()

logger = logging.getLogger(__name__)

QA_PROMPT = PromptTemplate.from_template(
    "Use the following pieces of context to answer the question at the end. "
    "If you don't know the answer, just say that you don't know, "
    "don't try to make up an answer.\n\n"
    "{context}\n\n"
    "Question: {question}\n"
    "Helpful Answer:"
)

DOCUMENT_SEPARATOR = "\n\n"


class GeminiGenerator:
    """
    Answers a question from "stuffed" context documents using Gemini via the google-genai SDK.
    """
    def __init__(self, model_name: str = "gemini-2.5-flash-lite"):
        api_key = os.getenv("GOOGLE_API_KEY")
        if not api_key:
            logger.critical("GOOGLE_API_KEY not found in environment variables.")
            raise ValueError("GOOGLE_API_KEY is required.")

        self.client = genai.Client(api_key=api_key)
        self.model_name = model_name

    @retry(
        retry=retry_if_exception_type(Exception), # 429s are buried in SDK exceptions
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=2, min=4, max=20),
        reraise=True,
    )
    def _call_gemini(self, prompt: str):
        """Helper method to call Gemini with retry logic."""
        return self.client.models.generate_content(
            model=self.model_name,
            contents=prompt
        )

    def build_prompt(self, question: str, documents: List[Document]) -> str:
        context = DOCUMENT_SEPARATOR.join(doc.page_content for doc in documents)
        return QA_PROMPT.format(context=context, question=question)

    def generate_answer(self, question: str, documents: List[Document]) -> str:
        """
        Stuffs the documents into the QA prompt and returns the model's answer.
        """
        prompt = self.build_prompt(question, documents)
        response = self._call_gemini(prompt)
        return response.text
