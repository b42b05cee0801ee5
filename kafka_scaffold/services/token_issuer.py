"""Bearer token generation and .env patching."""

import hashlib
import logging
import re
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from kafka_scaffold.config import TokenConfig

logger = logging.getLogger(__name__)


@dataclass
class IssuedToken:
    """A freshly issued token and where it was written."""
    token: str
    token_hash: str
    token_path: Path
    env_path: Path
    replaced: bool


def generate_token(length: int = 64) -> str:
    """Random token of length bytes, hex encoded."""
    return secrets.token_hex(length)


def hash_token(token: str) -> str:
    """Stored representation of a token."""
    return hashlib.sha256(token.encode()).hexdigest()


def set_env_var(env_path: Union[str, Path], key: str, value: str) -> bool:
    """Set KEY=value in a dotenv style file.
    
    Existing KEY= lines are rewritten in place; otherwise the line is
    appended. Returns True when an existing line was replaced.
    """
    env_path = Path(env_path)
    content = env_path.read_text(encoding='utf-8') if env_path.exists() else ''
    
    pattern = re.compile(rf'^{re.escape(key)}=.*$', re.MULTILINE)
    line = f'{key}={value}'
    
    if pattern.search(content):
        env_path.write_text(pattern.sub(lambda _: line, content), encoding='utf-8')
        return True
    
    if content and not content.endswith('\n'):
        content += '\n'
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text(f'{content}{line}\n', encoding='utf-8')
    return False


class TokenIssuer:
    """Issues API bearer tokens for the host application."""
    
    def __init__(self, settings: TokenConfig, base_dir: Union[str, Path] = '.'):
        self.settings = settings
        self.base_dir = Path(base_dir)
    
    def issue(self) -> IssuedToken:
        token = generate_token(self.settings.length)
        token_hash = hash_token(token)
        
        env_path = self.base_dir / self.settings.env_path
        replaced = set_env_var(env_path, self.settings.env_key, token_hash)
        
        token_path = self.base_dir / self.settings.token_path
        token_path.parent.mkdir(parents=True, exist_ok=True)
        token_path.write_text(token, encoding='utf-8')
        
        logger.info(f"Issued token, hash written to {env_path} ({'replaced' if replaced else 'appended'})")
        
        return IssuedToken(
            token=token,
            token_hash=token_hash,
            token_path=token_path,
            env_path=env_path,
            replaced=replaced
        )
