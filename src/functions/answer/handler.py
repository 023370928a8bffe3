import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger()
logger.setLevel(logging.INFO)

# handler.py -> answer/ -> functions/ -> src/ -> deployment root
DEPLOY_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ARTIFACT = DEPLOY_ROOT / "answer.toml"

RESPONSE_HEADERS = {
    "content-type": "text/plain; charset=utf-8",
    "cache-control": "no-store",
}


class ReadFailure(Exception):
    """The answer artifact could not be located or read."""

    def __init__(self, location: str, reason: str):
        super().__init__(f"Cannot read {location}: {reason}")
        self.location = location


@dataclass(frozen=True)
class Request:
    # Kept for the runtime boundary only; handle() never looks at these.
    method: str = "GET"
    headers: dict = field(default_factory=dict)
    query: dict = field(default_factory=dict)
    body: str | None = None

    @classmethod
    def from_event(cls, event: dict | None) -> "Request":
        event = event or {}
        return cls(
            method=event.get("httpMethod") or "GET",
            headers=event.get("headers") or {},
            query=event.get("queryStringParameters") or {},
            body=event.get("body"),
        )


@dataclass(frozen=True)
class Response:
    status: int
    headers: dict
    body: bytes

    def to_proxy(self) -> dict:
        return {
            "statusCode": self.status,
            "headers": dict(self.headers),
            "body": self.body.decode("utf-8"),
            "isBase64Encoded": False,
        }


@dataclass(frozen=True)
class AnswerConfig:
    artifact_path: Path = DEFAULT_ARTIFACT


class AnswerHandler:
    def __init__(self, config: AnswerConfig):
        self.config = config

    def read_artifact(self) -> bytes:
        path = self.config.artifact_path
        try:
            data = path.read_bytes()
            # Validate only; to_proxy() does the decode the runtime needs
            _ = data.decode("utf-8")
        except OSError as e:
            logger.error("Artifact read failed path=%s: %s", path, str(e))
            raise ReadFailure(str(path), str(e)) from e
        except UnicodeDecodeError as e:
            logger.error("Artifact is not valid UTF-8 path=%s: %s", path, str(e))
            raise ReadFailure(str(path), "content is not valid UTF-8") from e

        logger.info("Served artifact path=%s bytes=%d", path, len(data))
        return data

    def handle(self, request: Request) -> Response:
        return Response(status=200, headers=dict(RESPONSE_HEADERS), body=self.read_artifact())


# Resolved once per cold start
_handler = AnswerHandler(AnswerConfig())


def lambda_handler(event, context):
    return _handler.handle(Request.from_event(event)).to_proxy()
