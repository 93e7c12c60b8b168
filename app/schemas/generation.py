from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from app.generators.app_gen.types import InfrastructureSelection

class InfrastructureModel(BaseModel):
    database: str = Field(..., examples=["fireproof"])
    storage: str = Field(..., examples=["ipfs"])
    rpc: str = Field(..., examples=["alchemy"])
    paymaster: Optional[str] = Field(None, examples=["coinbase-paymaster"])

    def to_selection(self) -> InfrastructureSelection:
        return InfrastructureSelection(
            database=self.database,
            storage=self.storage,
            rpc=self.rpc,
            paymaster=self.paymaster,
        )

class GenerateAppRequest(BaseModel):
    prompt: str = Field(..., examples=["Create a recipe sharing app"])
    template: Optional[str] = Field(None, examples=["social-feed"])
    category: str = "web"
    infrastructure: Optional[InfrastructureModel] = None

class GenerateAppResponse(BaseModel):
    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    degraded: bool = False
