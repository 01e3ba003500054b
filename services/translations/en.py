# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.confirm": "Confirm",

    # Buttons
    "button.add": "Add",
    "button.remove": "Remove",
    "button.save": "Save",

    # Wizard
    "wizard.title": "Publish property",
    "wizard.title.edit": "Edit property",
    "wizard.progress": "Step {current} of {total}",
    "wizard.button.cancel": "Cancel",
    "wizard.button.previous": "Previous",
    "wizard.button.next": "Next",
    "wizard.button.submit": "Publish",
    "wizard.button.submitting": "Publishing...",
    "wizard.confirm.cancel": "Discard the listing in progress?",

    # Steps
    "step.type_selection.title": "What kind of property are you listing?",
    "step.type_selection.description": "Pick the classification that fits best.",
    "step.basic_info.title": "Basic information",
    "step.basic_info.description": "Tell us about the property and how you want to rent it.",
    "step.location.title": "Location",
    "step.location.description": "Every unit shares the property's location.",
    "step.services.title": "Services",
    "step.services.description": "Services offered to tenants.",
    "step.rules.title": "House rules",
    "step.rules.description": "Rules tenants agree to.",
    "step.rules.group": "Rules",
    "step.common_areas.title": "Common areas",
    "step.common_areas.description": "Spaces shared by all tenants.",
    "step.unit_builder.title": "Units",
    "step.unit_builder.description": "Add the rooms or units you are renting out.",
    "step.media_gallery.title": "Gallery",
    "step.media_gallery.description": "Add photos of the property (at least one).",

    # Property types
    "property_type.habitacion": "Room",
    "property_type.habitacion.hint": "A single room",
    "property_type.pension": "Boarding house",
    "property_type.pension.hint": "House with several rooms for rent",
    "property_type.apartamento": "Apartment",
    "property_type.apartamento.hint": "Whole apartment or by room",
    "property_type.aparta-estudio": "Studio",
    "property_type.aparta-estudio.hint": "Independent studio space",

    # Basic info fields
    "field.title": "Title",
    "field.title.placeholder": "e.g. Boarding house near campus",
    "field.description": "Description",
    "field.description.placeholder": "Describe the property (at least 50 characters)",
    "field.rental_mode": "Rental mode",
    "rental_mode.by_unit": "By room",
    "rental_mode.complete": "Whole property",
    "field.requires_deposit": "Requires deposit",
    "field.minimum_contract": "Minimum contract",
    "field.minimum_contract.none": "No minimum",
    "field.minimum_contract.suffix": " months",

    # Location fields
    "field.city": "City",
    "field.city.placeholder": "Select a city",
    "field.city.unknown": "City #{id}",
    "field.city.manual": "City id",
    "field.city.manual.hint": "The city list could not be loaded; enter the city id.",
    "field.street": "Address",
    "field.street.placeholder": "e.g. Calle 10 # 20-30",
    "field.neighborhood": "Neighborhood",
    "field.coordinates": "Coordinates (lat, lng)",
    "field.nearby_institutions": "Nearby institutions",
    "field.institution_id": "Institution",
    "field.distance": "Distance",
    "field.distance.unknown": "No distance",
    "field.note.placeholder": "Note (optional)",

    # Services
    "service.breakfast": "Breakfast",
    "service.lunch": "Lunch",
    "service.dinner": "Dinner",
    "service.housekeeping": "Housekeeping",
    "service.laundry": "Laundry",
    "service.wifi": "WiFi",
    "service.utilities": "Utilities",
    "service.included": "Included",
    "service.group.food": "Meals",
    "service.group.utilities": "Utilities",
    "service.group.other": "Other",

    # Rules
    "rule.smoking": "Smoking",
    "rule.pets": "Pets",
    "rule.visits": "Visits",
    "rule.noise": "Noise",
    "rule.curfew": "Curfew",
    "rule.visits.placeholder": "e.g. Until 9 p.m.",
    "rule.noise.placeholder": "e.g. Quiet after 10 p.m.",
    "rule.curfew.placeholder": "e.g. 11:00 p.m.",
    "rule.allowed": "Allowed",
    "rule.not_allowed": "Not allowed",

    # Units
    "unit.column.title": "Title",
    "unit.column.rent": "Rent",
    "unit.column.room_type": "Type",
    "unit.column.beds": "Beds",
    "unit.column.images": "Photos",
    "unit.button.add": "Add unit",
    "unit.button.edit": "Edit",
    "unit.hint.by_unit": "Add at least one unit.",
    "unit.hint.complete": "Describe the whole property as a single unit.",
    "unit.summary": "{count} units · average {average} · min {minimum} · max {maximum}",
    "unit.summary.empty": "No units added yet.",
    "unit.monthly_rent": "Monthly rent",
    "unit.deposit": "Deposit",
    "unit.area": "Area",
    "unit.area.unknown": "Not specified",
    "unit.room_type": "Room type",
    "unit.beds": "Beds in room",
    "unit.amenities": "Amenities",
    "unit.amenities.empty": "No amenities available.",
    "unit.images": "Unit photos",
    "unit_dialog.title.add": "New unit",
    "unit_dialog.title.edit": "Edit unit",
    "unit_dialog.title.placeholder": "e.g. Room 1",
    "room_type.individual": "Individual",
    "room_type.shared": "Shared",

    # Gallery
    "gallery.url.placeholder": "Image URL or path",
    "gallery.browse": "Browse...",
    "gallery.count": "{count} of {max} photos",

    # Validation
    "validation.type.required": "Select a property type.",
    "validation.title.min": "Title must be at least {min} characters.",
    "validation.title.max": "Title cannot exceed {max} characters.",
    "validation.description.min": "Description must be at least {min} characters.",
    "validation.description.max": "Description cannot exceed {max} characters.",
    "validation.rental_mode.required": "Select a rental mode.",
    "validation.contract.range": "Minimum contract must be between {min} and {max} months.",
    "validation.location.city": "Select a city.",
    "validation.location.street": "Enter the address.",
    "validation.location.neighborhood": "Enter the neighborhood.",
    "validation.location.coordinates": "Enter the property's coordinates.",
    "validation.location.distance": "Distance to an institution must be greater than zero.",
    "validation.service.cost": "Additional cost of {service} cannot be negative.",
    "validation.rule.value": "Fill in the value of the \"{rule}\" rule.",
    "validation.common_areas.required": "Select at least one common area.",
    "validation.unit.title.min": "Unit title must be at least {min} characters.",
    "validation.unit.title.max": "Unit title cannot exceed {max} characters.",
    "validation.unit.rent.required": "Enter the monthly rent.",
    "validation.unit.rent.integer": "Rent must be a whole number.",
    "validation.unit.rent.min": "Minimum rent is ${min}.",
    "validation.unit.deposit.negative": "Deposit cannot be negative.",
    "validation.unit.area.negative": "Area cannot be negative.",
    "validation.unit.room_type.required": "Select a room type.",
    "validation.unit.beds.range": "Beds must be between {min} and {max}.",
    "validation.unit.beds.shared": "A shared room needs at least {min} beds.",
    "validation.unit.images.max": "At most {max} photos per unit.",
    "validation.units.required": "Add at least one unit to continue.",
    "validation.units.complete_exactly_one": "A whole property is described by exactly one unit.",
    "validation.units.complete_single": "A whole property holds a single unit.",
    "validation.gallery.required": "Add at least one photo.",
    "validation.gallery.max": "At most {max} photos in the gallery.",

    # Errors
    "error.api.unauthorized": "Your session is not valid. Please sign in again.",
    "error.api.not_found": "The property does not exist.",
    "error.api.server": "Server error. Please try again later.",
    "error.api.submit_failed": "Failed to publish the property",
    "error.api.timeout": "The server took too long to respond.",
    "error.api.connection": "Could not connect to the server.",
    "error.submit.missing_owner": "Select the property owner.",
    "error.submit.missing_property": "The property to update was not found.",
    "error.submit.no_units": "Add at least one unit before publishing.",
    "error.unexpected": "An unexpected error occurred.",

    # Success
    "success.submitted": "Property published!",
}
