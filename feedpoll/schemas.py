from pydantic import BaseModel, Field
from typing import List, Literal, Optional

class ColumnSummary(BaseModel):
    name: str
    kind: Literal["numeric", "categorical", "empty"]
    count: int = Field(description="Number of non-missing cells")
    missing: int = Field(default=0, description="Number of empty/NA cells")

    # numeric columns
    min: Optional[float] = None
    q1: Optional[float] = Field(None, description="1st quartile")
    median: Optional[float] = None
    mean: Optional[float] = None
    q3: Optional[float] = Field(None, description="3rd quartile")
    max: Optional[float] = None

    # categorical columns
    unique: Optional[int] = Field(None, description="Number of distinct values")
    top: Optional[str] = Field(None, description="Most frequent value")
    top_count: Optional[int] = None

class Summary(BaseModel):
    row_count: int
    column_count: int
    columns: List[ColumnSummary]

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    def column(self, name: str) -> ColumnSummary:
        for c in self.columns:
            if c.name == name:
                return c
        raise KeyError(name)
