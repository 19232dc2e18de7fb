import re

from fastapi import Header, HTTPException

from app.utils.identifiers import normalize_id

TOKEN_ADDRESS = re.compile(r"^0x[a-fA-F0-9]{40}$")


def get_caller_id(x_caller_id: str = Header(default="")) -> str:
    # Identity is authenticated by the transport in front of this service
    caller_id = normalize_id(x_caller_id)
    if not caller_id:
        raise HTTPException(status_code=401, detail="Missing X-Caller-Id header")
    return caller_id


def get_token_address(token_id: str) -> str:
    if not TOKEN_ADDRESS.match(token_id):
        raise HTTPException(status_code=400, detail="Invalid token address format")
    return normalize_id(token_id)
