from pydantic import BaseModel


class TokenInfo(BaseModel):
    address: str
    symbol: str
    name: str
    decimals: int


class TokenCatalog(BaseModel):
    tokens: list[TokenInfo]
    count: int
    network: str
