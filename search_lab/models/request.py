"""Request models for API endpoints."""

from pydantic import BaseModel, Field, field_validator


def _not_blank(v: str, name: str) -> str:
    if not v or not v.strip():
        raise ValueError(f"{name} cannot be empty")
    return v.strip()


class InsertNumberRequest(BaseModel):
    """Request model for inserting into the sorted sequence."""
    
    value: int = Field(..., description="Integer to insert")


class KeyValueRequest(BaseModel):
    """Request model for inserting into the exact match store."""
    
    key: str = Field(..., min_length=1, description="Key to store")
    value: str = Field(..., description="Value to associate with the key")

    @field_validator('key')
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Validate and normalize the key."""
        return _not_blank(v, "Key")

    @field_validator('value')
    @classmethod
    def validate_value(cls, v: str) -> str:
        """Validate and normalize the value."""
        return _not_blank(v, "Value")


class WordRequest(BaseModel):
    """Request model for inserting a word into the prefix tree."""
    
    word: str = Field(..., min_length=1, description="Word to insert")

    @field_validator('word')
    @classmethod
    def validate_word(cls, v: str) -> str:
        """Validate and normalize the word."""
        return _not_blank(v, "Word")


class TextRequest(BaseModel):
    """Request model for adding a text to the pattern matcher."""
    
    text: str = Field(..., min_length=1, description="Text to add")

    @field_validator('text')
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate and normalize the text."""
        return _not_blank(v, "Text")


class PatternRequest(BaseModel):
    """Request model for substring searches."""
    
    pattern: str = Field(..., min_length=1, description="Pattern to search for")

    @field_validator('pattern')
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Validate and normalize the pattern."""
        return _not_blank(v, "Pattern")
