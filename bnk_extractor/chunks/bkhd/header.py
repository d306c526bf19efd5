# bnk_extractor/chunks/bkhd/header.py
from dataclasses import dataclass
from typing import Dict, Any

@dataclass(frozen=True)
class BankHeader:
    """Leading fields of the BKHD chunk.
    
    The version decides how some hierarchy objects are laid out.
    """
    version: int
    bank_id: int

    SIZE = 8

    def to_dict(self) -> Dict[str, Any]:
        return {
            'version': self.version,
            'bank_id': self.bank_id
        }
