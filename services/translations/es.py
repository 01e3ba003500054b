# -*- coding: utf-8 -*-
"""Spanish translations (default language)."""

ES_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.confirm": "Confirmar",

    # Buttons
    "button.add": "Agregar",
    "button.remove": "Quitar",
    "button.save": "Guardar",

    # Wizard
    "wizard.title": "Publicar propiedad",
    "wizard.title.edit": "Editar propiedad",
    "wizard.progress": "Paso {current} de {total}",
    "wizard.button.cancel": "Cancelar",
    "wizard.button.previous": "Anterior",
    "wizard.button.next": "Siguiente",
    "wizard.button.submit": "Publicar",
    "wizard.button.submitting": "Publicando...",
    "wizard.confirm.cancel": "¿Descartar la publicación en curso?",

    # Steps
    "step.type_selection.title": "¿Qué tipo de propiedad vas a publicar?",
    "step.type_selection.description": "Elige la clasificación que mejor la describe.",
    "step.basic_info.title": "Información básica",
    "step.basic_info.description": "Cuéntanos sobre tu propiedad y cómo quieres arrendarla.",
    "step.location.title": "Ubicación",
    "step.location.description": "Todas las unidades comparten la ubicación de la propiedad.",
    "step.services.title": "Servicios",
    "step.services.description": "Servicios que ofreces a tus inquilinos.",
    "step.rules.title": "Reglas de la casa",
    "step.rules.description": "Normas de convivencia de la propiedad.",
    "step.rules.group": "Reglas",
    "step.common_areas.title": "Áreas comunes",
    "step.common_areas.description": "Espacios compartidos por todos los inquilinos.",
    "step.unit_builder.title": "Unidades",
    "step.unit_builder.description": "Agrega las habitaciones o unidades que vas a arrendar.",
    "step.media_gallery.title": "Galería",
    "step.media_gallery.description": "Agrega fotos de la propiedad (al menos una).",

    # Property types
    "property_type.habitacion": "Habitación",
    "property_type.habitacion.hint": "Una habitación individual",
    "property_type.pension": "Pensión",
    "property_type.pension.hint": "Casa con varias habitaciones en arriendo",
    "property_type.apartamento": "Apartamento",
    "property_type.apartamento.hint": "Apartamento completo o por habitaciones",
    "property_type.aparta-estudio": "Aparta-estudio",
    "property_type.aparta-estudio.hint": "Espacio independiente tipo estudio",

    # Basic info fields
    "field.title": "Título",
    "field.title.placeholder": "Ej: Pensión cerca a la universidad",
    "field.description": "Descripción",
    "field.description.placeholder": "Describe la propiedad (mínimo 50 caracteres)",
    "field.rental_mode": "Modalidad de arriendo",
    "rental_mode.by_unit": "Por habitaciones",
    "rental_mode.complete": "Propiedad completa",
    "field.requires_deposit": "Requiere depósito",
    "field.minimum_contract": "Contrato mínimo",
    "field.minimum_contract.none": "Sin mínimo",
    "field.minimum_contract.suffix": " meses",

    # Location fields
    "field.city": "Ciudad",
    "field.city.placeholder": "Selecciona una ciudad",
    "field.city.unknown": "Ciudad #{id}",
    "field.city.manual": "Id de ciudad",
    "field.city.manual.hint": "No se pudo cargar el listado de ciudades; escribe el identificador de la ciudad.",
    "field.street": "Dirección",
    "field.street.placeholder": "Ej: Calle 10 # 20-30",
    "field.neighborhood": "Barrio",
    "field.coordinates": "Coordenadas (lat, lng)",
    "field.nearby_institutions": "Instituciones cercanas",
    "field.institution_id": "Institución",
    "field.distance": "Distancia",
    "field.distance.unknown": "Sin distancia",
    "field.note.placeholder": "Nota (opcional)",

    # Services
    "service.breakfast": "Desayuno",
    "service.lunch": "Almuerzo",
    "service.dinner": "Cena",
    "service.housekeeping": "Aseo",
    "service.laundry": "Lavandería",
    "service.wifi": "WiFi",
    "service.utilities": "Servicios públicos",
    "service.included": "Incluido",
    "service.group.food": "Alimentación",
    "service.group.utilities": "Servicios básicos",
    "service.group.other": "Otros",

    # Rules
    "rule.smoking": "Fumar",
    "rule.pets": "Mascotas",
    "rule.visits": "Visitas",
    "rule.noise": "Ruido",
    "rule.curfew": "Hora de llegada",
    "rule.visits.placeholder": "Ej: Hasta las 9 p.m.",
    "rule.noise.placeholder": "Ej: Silencio después de las 10 p.m.",
    "rule.curfew.placeholder": "Ej: 11:00 p.m.",
    "rule.allowed": "Permitido",
    "rule.not_allowed": "No permitido",

    # Units
    "unit.column.title": "Título",
    "unit.column.rent": "Arriendo",
    "unit.column.room_type": "Tipo",
    "unit.column.beds": "Camas",
    "unit.column.images": "Fotos",
    "unit.button.add": "Agregar unidad",
    "unit.button.edit": "Editar",
    "unit.hint.by_unit": "Agrega al menos una unidad.",
    "unit.hint.complete": "Describe la propiedad completa como una sola unidad.",
    "unit.summary": "{count} unidades · promedio {average} · mín {minimum} · máx {maximum}",
    "unit.summary.empty": "Aún no has agregado unidades.",
    "unit.monthly_rent": "Arriendo mensual",
    "unit.deposit": "Depósito",
    "unit.area": "Área",
    "unit.area.unknown": "Sin especificar",
    "unit.room_type": "Tipo de habitación",
    "unit.beds": "Camas en la habitación",
    "unit.amenities": "Comodidades",
    "unit.amenities.empty": "No hay comodidades disponibles.",
    "unit.images": "Fotos de la unidad",
    "unit_dialog.title.add": "Nueva unidad",
    "unit_dialog.title.edit": "Editar unidad",
    "unit_dialog.title.placeholder": "Ej: Habitación 1",
    "room_type.individual": "Individual",
    "room_type.shared": "Compartida",

    # Gallery
    "gallery.url.placeholder": "URL o ruta de la imagen",
    "gallery.browse": "Examinar...",
    "gallery.count": "{count} de {max} fotos",

    # Validation
    "validation.type.required": "Selecciona un tipo de propiedad.",
    "validation.title.min": "El título debe tener al menos {min} caracteres.",
    "validation.title.max": "El título no puede superar {max} caracteres.",
    "validation.description.min": "La descripción debe tener al menos {min} caracteres.",
    "validation.description.max": "La descripción no puede superar {max} caracteres.",
    "validation.rental_mode.required": "Selecciona la modalidad de arriendo.",
    "validation.contract.range": "El contrato mínimo debe estar entre {min} y {max} meses.",
    "validation.location.city": "Selecciona una ciudad.",
    "validation.location.street": "Ingresa la dirección.",
    "validation.location.neighborhood": "Ingresa el barrio.",
    "validation.location.coordinates": "Ingresa las coordenadas de la propiedad.",
    "validation.location.distance": "La distancia a una institución debe ser mayor que cero.",
    "validation.service.cost": "El costo adicional de {service} no puede ser negativo.",
    "validation.rule.value": "Completa el valor de la regla \"{rule}\".",
    "validation.common_areas.required": "Selecciona al menos un área común.",
    "validation.unit.title.min": "El título de la unidad debe tener al menos {min} caracteres.",
    "validation.unit.title.max": "El título de la unidad no puede superar {max} caracteres.",
    "validation.unit.rent.required": "Ingresa el arriendo mensual.",
    "validation.unit.rent.integer": "El arriendo debe ser un número entero.",
    "validation.unit.rent.min": "El arriendo mínimo es ${min}.",
    "validation.unit.deposit.negative": "El depósito no puede ser negativo.",
    "validation.unit.area.negative": "El área no puede ser negativa.",
    "validation.unit.room_type.required": "Selecciona el tipo de habitación.",
    "validation.unit.beds.range": "El número de camas debe estar entre {min} y {max}.",
    "validation.unit.beds.shared": "Una habitación compartida necesita al menos {min} camas.",
    "validation.unit.images.max": "Máximo {max} fotos por unidad.",
    "validation.units.required": "Agrega al menos una unidad para continuar.",
    "validation.units.complete_exactly_one": "Una propiedad completa se describe con exactamente una unidad.",
    "validation.units.complete_single": "Una propiedad completa solo admite una unidad.",
    "validation.gallery.required": "Agrega al menos una foto.",
    "validation.gallery.max": "Máximo {max} fotos en la galería.",

    # Errors
    "error.api.unauthorized": "Tu sesión no es válida. Inicia sesión nuevamente.",
    "error.api.not_found": "La propiedad no existe.",
    "error.api.server": "Error del servidor. Intenta más tarde.",
    "error.api.submit_failed": "Error al publicar la propiedad",
    "error.api.timeout": "El servidor tardó demasiado en responder.",
    "error.api.connection": "No se pudo conectar con el servidor.",
    "error.submit.missing_owner": "Selecciona el propietario de la propiedad.",
    "error.submit.missing_property": "No se encontró la propiedad a actualizar.",
    "error.submit.no_units": "Agrega al menos una unidad antes de publicar.",
    "error.unexpected": "Ocurrió un error inesperado.",

    # Success
    "success.submitted": "¡Propiedad publicada!",
}
