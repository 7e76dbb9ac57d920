"""
Mappers between domain objects and DTOs.
"""
from typing import FrozenSet, Mapping
from .dto import ExtractionResultDTO, SupportedTypesDTO
from ..domain.entities import ExtractionResult


def to_result_dto(result: ExtractionResult) -> ExtractionResultDTO:
    return ExtractionResultDTO(**result.to_dict())


def to_supported_types_dto(types: Mapping[str, FrozenSet[str]]) -> SupportedTypesDTO:
    return SupportedTypesDTO(types={category: sorted(extensions) for category, extensions in types.items()})
