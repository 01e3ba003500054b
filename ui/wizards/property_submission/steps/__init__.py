# -*- coding: utf-8 -*-
"""Steps of the property submission wizard, in step-index order."""

from .type_selection_step import TypeSelectionStep
from .basic_info_step import BasicInfoStep
from .location_step import LocationStep
from .services_step import ServicesStep
from .rules_step import RulesStep
from .common_areas_step import CommonAreasStep
from .unit_builder_step import UnitBuilderStep
from .media_gallery_step import MediaGalleryStep

__all__ = [
    'TypeSelectionStep',
    'BasicInfoStep',
    'LocationStep',
    'ServicesStep',
    'RulesStep',
    'CommonAreasStep',
    'UnitBuilderStep',
    'MediaGalleryStep',
]
