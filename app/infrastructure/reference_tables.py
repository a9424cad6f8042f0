"""
Infrastructure layer: read-only crop, soil and disease reference tables.

Raw records from ``reference_data`` are validated into frozen domain
profiles once, then served through read-only mappings. Lookups are
case-insensitive and ignore whitespace; unknown identifiers resolve to
documented fallback profiles instead of failing.
"""
import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from app.domain.models import CropProfile, DiseaseProfile, SoilProfile
from app.infrastructure import reference_data


logger = logging.getLogger(__name__)


def normalize_key(identifier: Optional[str]) -> str:
    """
    Normalize an identifier for table lookup.

    Args:
        identifier: Crop, soil or disease identifier as entered by a user

    Returns:
        Lower-case identifier without whitespace ('' for None)
    """
    if identifier is None:
        return ""
    if isinstance(identifier, Enum):
        identifier = identifier.value
    return "".join(str(identifier).split()).lower()


class ReferenceTables:
    """
    Immutable provider of agronomic reference profiles.

    Safe to share across threads and requests: nothing is mutated after
    construction.
    """

    def __init__(
        self,
        crops: Optional[Mapping[str, dict]] = None,
        soils: Optional[Mapping[str, dict]] = None,
        diseases: Optional[Mapping[str, dict]] = None,
        soil_disease_risk: Optional[Mapping[str, Mapping[str, float]]] = None,
    ):
        """
        Build and validate the tables.

        Args:
            crops: Raw crop records keyed by crop id (defaults to the bundled data)
            soils: Raw soil records keyed by soil name
            diseases: Raw disease records keyed by disease id
            soil_disease_risk: Soil x crop disease pressure (0-100)

        Raises:
            pydantic.ValidationError: If any record is malformed
        """
        crops = reference_data.CROP_DATA if crops is None else crops
        soils = reference_data.SOIL_DATA if soils is None else soils
        diseases = reference_data.DISEASE_DATA if diseases is None else diseases
        if soil_disease_risk is None:
            soil_disease_risk = reference_data.SOIL_DISEASE_RISK

        self._crops = MappingProxyType({
            normalize_key(key): CropProfile(**record) for key, record in crops.items()
        })
        self._soils = MappingProxyType({
            normalize_key(key): SoilProfile(**record) for key, record in soils.items()
        })
        self._diseases = MappingProxyType({
            normalize_key(key): DiseaseProfile(
                **{
                    **record,
                    "affected_crops": [normalize_key(c) for c in record["affected_crops"]],
                }
            )
            for key, record in diseases.items()
        })
        self._soil_disease_risk = MappingProxyType({
            normalize_key(soil): MappingProxyType({
                normalize_key(crop): value for crop, value in by_crop.items()
            })
            for soil, by_crop in soil_disease_risk.items()
        })

        self.generic_crop = CropProfile(**reference_data.GENERIC_CROP_DATA)
        self.fallback_soil = SoilProfile(**reference_data.FALLBACK_SOIL_DATA)

        logger.info(f"Loaded reference tables: {len(self._crops)} crops, "
                    f"{len(self._soils)} soils, {len(self._diseases)} diseases")

    @property
    def crops(self) -> Mapping[str, CropProfile]:
        return self._crops

    @property
    def soils(self) -> Mapping[str, SoilProfile]:
        return self._soils

    @property
    def diseases(self) -> Mapping[str, DiseaseProfile]:
        return self._diseases

    def has_crop(self, crop_id: Optional[str]) -> bool:
        return normalize_key(crop_id) in self._crops

    def get_crop(self, crop_id: Optional[str]) -> CropProfile:
        """
        Look up a crop profile.

        Args:
            crop_id: Crop identifier or display name, any case

        Returns:
            The crop profile, or the generic profile if the crop is unknown
        """
        profile = self._crops.get(normalize_key(crop_id))
        if profile is None:
            logger.warning(f"Unknown crop '{crop_id}', using generic crop profile")
            return self.generic_crop
        return profile

    def get_soil(self, soil_type: Optional[str]) -> SoilProfile:
        """
        Look up a soil profile.

        Args:
            soil_type: Soil type name (Clay, Sandy, Loamy, Silty), any case

        Returns:
            The soil profile, or the fallback profile if the soil is unknown
        """
        profile = self._soils.get(normalize_key(soil_type))
        if profile is None:
            logger.warning(f"Unknown soil type '{soil_type}', using fallback soil profile")
            return self.fallback_soil
        return profile

    def get_disease(self, disease_id: Optional[str]) -> Optional[DiseaseProfile]:
        """Look up a disease by id; None when unknown."""
        return self._diseases.get(normalize_key(disease_id))

    def diseases_for_crop(self, crop_id: Optional[str]) -> list[DiseaseProfile]:
        """
        Get every disease or pest that affects a crop.

        Args:
            crop_id: Crop identifier, any case

        Returns:
            Matching disease profiles in table order
        """
        key = normalize_key(crop_id)
        return [d for d in self._diseases.values() if key in d.affected_crops]

    def soil_disease_risk(self, soil_type: Optional[str], crop_id: Optional[str]) -> float:
        """Soil-driven disease pressure (0-100) for a crop."""
        by_crop = self._soil_disease_risk.get(normalize_key(soil_type), {})
        return by_crop.get(normalize_key(crop_id), reference_data.DEFAULT_SOIL_DISEASE_RISK)


# Singleton instance
_reference_tables: Optional[ReferenceTables] = None


def get_reference_tables() -> ReferenceTables:
    """
    Get or create the shared reference tables instance.

    Returns:
        ReferenceTables instance
    """
    global _reference_tables
    if _reference_tables is None:
        _reference_tables = ReferenceTables()
    return _reference_tables
