from pathlib import Path
from typing import Optional

import orjson
from injector import inject
from structlog.stdlib import BoundLogger

from core.settings import settings
from domain.interfaces import CredentialStore


class FileCredentialStore(CredentialStore):
    """Keeps the OpenAI API key between runs.

    An ``OPENAI_API_KEY`` from the environment wins over the saved file. Clearing
    the store forgets both for the rest of the process and deletes the file.
    """

    @inject
    def __init__(self, logger: BoundLogger):
        self.path = Path(settings.credential_path).expanduser()
        self.env_credential = settings.openai_api_key
        self.logger = logger

    def get(self) -> Optional[str]:
        if self.env_credential:
            return self.env_credential
        if not self.path.exists():
            return None
        try:
            data = orjson.loads(self.path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            self.logger.warning("Stored credential could not be read", path=str(self.path), error=str(e))
            return None
        credential = data.get("openai_api_key") if isinstance(data, dict) else None
        return credential or None

    def save(self, credential: str):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(mode=0o600, exist_ok=True)
        self.path.chmod(0o600)
        self.path.write_bytes(orjson.dumps({"openai_api_key": credential}))
        self.logger.info("Credential saved", path=str(self.path))

    def clear(self):
        self.env_credential = None
        self.path.unlink(missing_ok=True)
        self.logger.info("Stored credential cleared", path=str(self.path))
