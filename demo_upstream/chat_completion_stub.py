import re

from fastapi import FastAPI, Header, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

app = FastAPI(title="ChatCompletionStub", version="0.1.0")

PROMPT_PATTERN = re.compile(r"^Translate the following text from (?P<source>\w+) to (?P<target>\w+): (?P<text>.*)$", re.S)


class Message(BaseModel):
    role: str
    content: str


class ChatCompletionRequest(BaseModel):
    model: str = Field(..., min_length=1)
    messages: list[Message] = Field(..., min_length=1)


@app.post("/v1/chat/completions", response_model=None)
def chat_completions(
    payload: ChatCompletionRequest,
    authorization: str | None = Header(default=None),
) -> dict | JSONResponse:
    # Same error envelope the real endpoint uses.
    if not authorization or not authorization.startswith("Bearer "):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": {"message": "You didn't provide an API key."}},
        )

    match = PROMPT_PATTERN.match(payload.messages[-1].content)
    if match:
        content = f"[{match['target'].lower()}] {match['text']}"
    else:
        content = payload.messages[-1].content

    return {
        "model": payload.model,
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }
