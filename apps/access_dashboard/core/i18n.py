"""
Interface translations (Spanish / English)
"""
from flask import current_app, session

TRANSLATIONS = {
    'es': {
        # Navigation
        'nav.home': 'Inicio',
        'nav.vehicles': 'Vehículos',
        'nav.movements': 'Movimientos',
        'nav.summary': 'Resumen',
        'nav.users': 'Usuarios',
        'nav.configuration': 'Configuración',
        'nav.profile': 'Perfil',
        'nav.logout': 'Cerrar sesión',
        'nav.system': 'Sistema',

        # Common
        'common.login_required': 'Inicia sesión para continuar',
        'common.unauthorized': 'No tienes permisos para ver esta página',
        'common.session_expired': 'Tu sesión expiró, inicia sesión de nuevo',
        'common.rate_limited': 'Demasiadas solicitudes, intenta más tarde',
        'common.save': 'Guardar',
        'common.cancel': 'Cancelar',
        'common.close': 'Cerrar',

        # Login
        'login.title': 'Iniciar sesión',
        'login.email': 'Correo electrónico',
        'login.password': 'Contraseña',
        'login.submit': 'Ingresar',
        'login.no_account': '¿No tienes cuenta?',
        'login.register_link': 'Regístrate',
        'login.success': 'Inicio de sesión exitoso',
        'login.missing_fields': 'Correo y contraseña son obligatorios',
        'login.logged_out': 'Sesión cerrada',

        # Register
        'register.title': 'Crear cuenta',
        'register.name': 'Nombre completo',
        'register.document': 'Documento',
        'register.role_select': 'Selecciona un rol',
        'register.admin_role': 'Administrador',
        'register.user_role': 'Usuario',
        'register.email': 'Correo electrónico',
        'register.password': 'Contraseña',
        'register.confirm_password': 'Confirmar contraseña',
        'register.photo': 'Foto de perfil',
        'register.submit': 'Registrarse',
        'register.has_account': '¿Ya tienes cuenta?',
        'register.login_link': 'Inicia sesión',
        'register.password_mismatch': 'Las contraseñas no coinciden',
        'register.missing_fields': 'Completa todos los campos obligatorios',
        'register.invalid_role': 'Rol inválido',
        'register.success': 'Registro exitoso, ahora puedes iniciar sesión',

        # Two-factor
        'two_factor.setup_title': 'Activa la verificación en dos pasos',
        'two_factor.setup_help': 'Escanea el código QR con tu aplicación de autenticación e ingresa el código de 6 dígitos.',
        'two_factor.login_title': 'Verificación en dos pasos',
        'two_factor.login_help': 'Ingresa el código de 6 dígitos de tu aplicación de autenticación.',
        'two_factor.code': 'Código',
        'two_factor.verify': 'Verificar',
        'two_factor.invalid_code_format': 'El código debe tener 6 dígitos',
        'two_factor.enabled': 'Verificación en dos pasos activada',
        'two_factor.no_pending': 'No hay una verificación pendiente',

        # Vehicles
        'vehicles.page_title': 'Registro de vehículos',
        'vehicles.edit_title': 'Editar vehículo',
        'vehicles.search_placeholder': 'Buscar por nombre, placa o tipo',
        'vehicles.export_csv': 'Exportar CSV',
        'vehicles.manual_mode': 'Manual',
        'vehicles.auto_mode': 'Automático',
        'vehicles.owner': 'Nombre del propietario',
        'vehicles.plate': 'Placa',
        'vehicles.type': 'Tipo',
        'vehicles.type_carro': 'Carro',
        'vehicles.type_moto': 'Moto',
        'vehicles.type_bicicleta': 'Bicicleta',
        'vehicles.capture_face': 'Capturar rostro',
        'vehicles.register': 'Registrar',
        'vehicles.register_auto': 'Registrar (auto)',
        'vehicles.change_to_manual': 'Cambiar a manual',
        'vehicles.save_changes': 'Guardar cambios',
        'vehicles.registered_list': 'Vehículos registrados',
        'vehicles.no_vehicles': 'No hay vehículos registrados',
        'vehicles.total': 'total',
        'vehicles.clear_list': 'Limpiar lista',
        'vehicles.edit': 'Editar',
        'vehicles.delete': 'Eliminar',
        'vehicles.delete_confirm': '¿Eliminar este vehículo?',
        'vehicles.clear_confirm': '¿Eliminar todos los vehículos?',
        'vehicles.name_required': 'Nombre requerido',
        'vehicles.invalid_plate': 'Placa inválida',
        'vehicles.invalid_type': 'Tipo de vehículo inválido',
        'vehicles.duplicate_plate': 'Placa duplicada',
        'vehicles.not_found': 'Vehículo no encontrado',
        'vehicles.vehicle_registered': 'Vehículo registrado',
        'vehicles.vehicle_registered_auto': 'Vehículo registrado automáticamente',
        'vehicles.vehicle_updated': 'Vehículo actualizado',
        'vehicles.vehicle_deleted': 'Vehículo eliminado',
        'vehicles.list_cleared': 'Lista de vehículos vaciada',
        'vehicles.no_vehicles_to_export': 'No hay vehículos para exportar',
        'vehicles.capture_and_recognize': 'Capturar y reconocer',
        'vehicles.processing': 'Procesando...',
        'vehicles.start_camera': 'Iniciar cámara',
        'vehicles.stop_camera': 'Detener cámara',
        'vehicles.gate_camera': 'Cámara de portería',
        'vehicles.confidence': 'Confianza',
        'vehicles.plate_detected': 'Placa detectada',
        'vehicles.no_plate_detected': 'No se detectó placa',
        'vehicles.recognition_error': 'Error de reconocimiento',
        'vehicles.missing_api_key': 'Falta la API key de reconocimiento',
        'vehicles.camera_not_started': 'Cámara no iniciada',
        'vehicles.camera_error': 'Error al iniciar la cámara',
        'vehicles.camera_started': 'Cámara iniciada',
        'vehicles.camera_stopped': 'Cámara detenida',
        'vehicles.browser_not_supported': 'Tu navegador no soporta cámara',
        'vehicles.photo_captured': 'Foto capturada',
        'vehicles.capture_error': 'Error al capturar',

        # Movements
        'movements.title': 'Movimientos',
        'movements.register_new': 'Registrar movimiento',
        'movements.plate_placeholder': 'Placa del vehículo',
        'movements.entry': 'Entrada',
        'movements.exit': 'Salida',
        'movements.history': 'Historial',
        'movements.no_movements': 'No hay movimientos registrados',
        'movements.invalid_plate': 'Ingresa una placa válida',
        'movements.invalid_kind': 'Tipo de movimiento inválido',
        'movements.registered': 'Movimiento registrado',
        'movements.col_plate': 'Placa',
        'movements.col_type': 'Tipo',
        'movements.col_time': 'Hora',
        'movements.col_date': 'Fecha',

        # Summary
        'summary.welcome_user': 'Bienvenido',
        'summary.today_date': 'Hoy es',
        'summary.entries_title': 'Entradas hoy',
        'summary.exits_title': 'Salidas hoy',
        'summary.total_title': 'Movimientos totales',
        'summary.weekly_report_title': 'Actividad semanal',
        'summary.entries': 'Entradas',
        'summary.exits': 'Salidas',
        'days.sun': 'Dom',
        'days.mon': 'Lun',
        'days.tue': 'Mar',
        'days.wed': 'Mié',
        'days.thu': 'Jue',
        'days.fri': 'Vie',
        'days.sat': 'Sáb',

        # Users
        'users.title': 'Usuarios',
        'users.search_placeholder': 'Buscar por nombre, correo o documento',
        'users.no_users_found': 'No se encontraron usuarios',
        'users.user_details': 'Detalles del usuario',
        'users.edit_user': 'Editar usuario',
        'users.delete_confirm': '¿Eliminar este usuario?',
        'users.user_deleted': 'Usuario eliminado',
        'users.name_required': 'Nombre y correo son obligatorios',
        'users.changes_saved': 'Cambios guardados',
        'users.not_found': 'Usuario no encontrado',
        'users.role_placeholder': 'Rol',
        'users.col_name': 'Nombre',
        'users.col_email': 'Correo',
        'users.col_role': 'Rol',
        'users.col_document': 'Documento',
        'users.col_status': 'Estado',
        'users.col_registered': 'Registrado',
        'users.view': 'Ver',
        'users.edit': 'Editar',
        'users.delete': 'Eliminar',

        # Admin home
        'dashboard.home_panel': 'Panel de inicio',
        'dashboard.total_users': 'Usuarios',
        'dashboard.active_users': 'Usuarios activos',
        'dashboard.users_today': 'Registros de hoy',
        'dashboard.cars_today': 'Vehículos hoy',
        'dashboard.quick_access': 'Accesos rápidos',
        'dashboard.profile_description': 'Consulta tu información personal',
        'dashboard.configuration_description': 'Ajusta tu perfil y el idioma',
        'dashboard.vehicles_description': 'Registra y administra vehículos',
        'dashboard.search_placeholder': 'Buscar usuario por nombre',

        # Configuration
        'config.title': 'Configuración',
        'config.profile': 'Perfil',
        'config.name': 'Nombre',
        'config.email': 'Correo',
        'config.document': 'Documento',
        'config.role': 'Rol',
        'config.language': 'Idioma',
        'config.success': 'Configuración guardada exitosamente',
        'config.error': 'Error al guardar la configuración',

        # Profile
        'profile.title': 'Mi perfil',
        'profile.two_factor_enabled': 'Verificación en dos pasos activa',
        'profile.two_factor_disabled': 'Verificación en dos pasos inactiva',

        # System
        'system.title': 'Estado del sistema',
        'system.services': 'Servicios',
        'system.logs': 'Registros',
        'system.status': 'Estado',
        'system.checks': 'Verificaciones',
        'system.errors': 'Errores',
        'system.uptime': 'Tiempo activo',
        'system.healthy_services': 'Servicios activos',
        'system.error_rate': 'Tasa de error',

        'app.title': 'Control de acceso vehicular',
        'common.back': 'Volver',
        'users.status_active': 'Activo',
        'users.status_blocked': 'Bloqueado',
        'movements.unknown': 'Desconocido',
        'language.es': 'Español',
        'language.en': 'Inglés',
        'common.store_corrupted': 'Los datos guardados están dañados; no se aplicaron cambios',
        'system.last_error': 'Último error',
    },
    'en': {
        'nav.home': 'Home',
        'nav.vehicles': 'Vehicles',
        'nav.movements': 'Movements',
        'nav.summary': 'Summary',
        'nav.users': 'Users',
        'nav.configuration': 'Settings',
        'nav.profile': 'Profile',
        'nav.logout': 'Log out',
        'nav.system': 'System',

        'common.login_required': 'Log in to continue',
        'common.unauthorized': 'You are not allowed to view this page',
        'common.session_expired': 'Your session expired, please log in again',
        'common.rate_limited': 'Too many requests, try again later',
        'common.save': 'Save',
        'common.cancel': 'Cancel',
        'common.close': 'Close',

        'login.title': 'Log in',
        'login.email': 'Email',
        'login.password': 'Password',
        'login.submit': 'Log in',
        'login.no_account': "Don't have an account?",
        'login.register_link': 'Sign up',
        'login.success': 'Logged in successfully',
        'login.missing_fields': 'Email and password are required',
        'login.logged_out': 'Logged out',

        'register.title': 'Create account',
        'register.name': 'Full name',
        'register.document': 'Document',
        'register.role_select': 'Select a role',
        'register.admin_role': 'Administrator',
        'register.user_role': 'User',
        'register.email': 'Email',
        'register.password': 'Password',
        'register.confirm_password': 'Confirm password',
        'register.photo': 'Profile photo',
        'register.submit': 'Sign up',
        'register.has_account': 'Already have an account?',
        'register.login_link': 'Log in',
        'register.password_mismatch': 'Passwords do not match',
        'register.missing_fields': 'Fill in all required fields',
        'register.invalid_role': 'Invalid role',
        'register.success': 'Registration successful, you can now log in',

        'two_factor.setup_title': 'Enable two-factor authentication',
        'two_factor.setup_help': 'Scan the QR code with your authenticator app and enter the 6-digit code.',
        'two_factor.login_title': 'Two-factor verification',
        'two_factor.login_help': 'Enter the 6-digit code from your authenticator app.',
        'two_factor.code': 'Code',
        'two_factor.verify': 'Verify',
        'two_factor.invalid_code_format': 'The code must have 6 digits',
        'two_factor.enabled': 'Two-factor authentication enabled',
        'two_factor.no_pending': 'There is no pending verification',

        'vehicles.page_title': 'Vehicle registry',
        'vehicles.edit_title': 'Edit vehicle',
        'vehicles.search_placeholder': 'Search by name, plate or type',
        'vehicles.export_csv': 'Export CSV',
        'vehicles.manual_mode': 'Manual',
        'vehicles.auto_mode': 'Automatic',
        'vehicles.owner': 'Owner name',
        'vehicles.plate': 'Plate',
        'vehicles.type': 'Type',
        'vehicles.type_carro': 'Car',
        'vehicles.type_moto': 'Motorcycle',
        'vehicles.type_bicicleta': 'Bicycle',
        'vehicles.capture_face': 'Capture face',
        'vehicles.register': 'Register',
        'vehicles.register_auto': 'Register (auto)',
        'vehicles.change_to_manual': 'Switch to manual',
        'vehicles.save_changes': 'Save changes',
        'vehicles.registered_list': 'Registered vehicles',
        'vehicles.no_vehicles': 'No vehicles registered',
        'vehicles.total': 'total',
        'vehicles.clear_list': 'Clear list',
        'vehicles.edit': 'Edit',
        'vehicles.delete': 'Delete',
        'vehicles.delete_confirm': 'Delete this vehicle?',
        'vehicles.clear_confirm': 'Delete every vehicle?',
        'vehicles.name_required': 'Name required',
        'vehicles.invalid_plate': 'Invalid plate',
        'vehicles.invalid_type': 'Invalid vehicle type',
        'vehicles.duplicate_plate': 'Duplicate plate',
        'vehicles.not_found': 'Vehicle not found',
        'vehicles.vehicle_registered': 'Vehicle registered',
        'vehicles.vehicle_registered_auto': 'Vehicle registered automatically',
        'vehicles.vehicle_updated': 'Vehicle updated',
        'vehicles.vehicle_deleted': 'Vehicle deleted',
        'vehicles.list_cleared': 'Vehicle list cleared',
        'vehicles.no_vehicles_to_export': 'No vehicles to export',
        'vehicles.capture_and_recognize': 'Capture and recognize',
        'vehicles.processing': 'Processing...',
        'vehicles.start_camera': 'Start camera',
        'vehicles.stop_camera': 'Stop camera',
        'vehicles.gate_camera': 'Gate camera',
        'vehicles.confidence': 'Confidence',
        'vehicles.plate_detected': 'Plate detected',
        'vehicles.no_plate_detected': 'No plate detected',
        'vehicles.recognition_error': 'Recognition error',
        'vehicles.missing_api_key': 'Plate recognition API key missing',
        'vehicles.camera_not_started': 'Camera not started',
        'vehicles.camera_error': 'Error starting the camera',
        'vehicles.camera_started': 'Camera started',
        'vehicles.camera_stopped': 'Camera stopped',
        'vehicles.browser_not_supported': 'Your browser does not support the camera',
        'vehicles.photo_captured': 'Photo captured',
        'vehicles.capture_error': 'Capture error',

        'movements.title': 'Movements',
        'movements.register_new': 'Register movement',
        'movements.plate_placeholder': 'Vehicle plate',
        'movements.entry': 'Entry',
        'movements.exit': 'Exit',
        'movements.history': 'History',
        'movements.no_movements': 'No movements registered',
        'movements.invalid_plate': 'Enter a valid plate',
        'movements.invalid_kind': 'Invalid movement type',
        'movements.registered': 'Movement registered',
        'movements.col_plate': 'Plate',
        'movements.col_type': 'Type',
        'movements.col_time': 'Time',
        'movements.col_date': 'Date',

        'summary.welcome_user': 'Welcome',
        'summary.today_date': 'Today is',
        'summary.entries_title': 'Entries today',
        'summary.exits_title': 'Exits today',
        'summary.total_title': 'Total movements',
        'summary.weekly_report_title': 'Weekly activity',
        'summary.entries': 'Entries',
        'summary.exits': 'Exits',
        'days.sun': 'Sun',
        'days.mon': 'Mon',
        'days.tue': 'Tue',
        'days.wed': 'Wed',
        'days.thu': 'Thu',
        'days.fri': 'Fri',
        'days.sat': 'Sat',

        'users.title': 'Users',
        'users.search_placeholder': 'Search by name, email or document',
        'users.no_users_found': 'No users found',
        'users.user_details': 'User details',
        'users.edit_user': 'Edit user',
        'users.delete_confirm': 'Delete this user?',
        'users.user_deleted': 'User deleted',
        'users.name_required': 'Name and email are required',
        'users.changes_saved': 'Changes saved',
        'users.not_found': 'User not found',
        'users.role_placeholder': 'Role',
        'users.col_name': 'Name',
        'users.col_email': 'Email',
        'users.col_role': 'Role',
        'users.col_document': 'Document',
        'users.col_status': 'Status',
        'users.col_registered': 'Registered',
        'users.view': 'View',
        'users.edit': 'Edit',
        'users.delete': 'Delete',

        'dashboard.home_panel': 'Home panel',
        'dashboard.total_users': 'Users',
        'dashboard.active_users': 'Active users',
        'dashboard.users_today': 'Sign-ups today',
        'dashboard.cars_today': 'Vehicles today',
        'dashboard.quick_access': 'Quick access',
        'dashboard.profile_description': 'Review your personal information',
        'dashboard.configuration_description': 'Adjust your profile and language',
        'dashboard.vehicles_description': 'Register and manage vehicles',
        'dashboard.search_placeholder': 'Search user by name',

        'config.title': 'Settings',
        'config.profile': 'Profile',
        'config.name': 'Name',
        'config.email': 'Email',
        'config.document': 'Document',
        'config.role': 'Role',
        'config.language': 'Language',
        'config.success': 'Settings saved successfully',
        'config.error': 'Error saving settings',

        'profile.title': 'My profile',
        'profile.two_factor_enabled': 'Two-factor authentication active',
        'profile.two_factor_disabled': 'Two-factor authentication inactive',

        'system.title': 'System status',
        'system.services': 'Services',
        'system.logs': 'Logs',
        'system.status': 'Status',
        'system.checks': 'Checks',
        'system.errors': 'Errors',
        'system.uptime': 'Uptime',
        'system.healthy_services': 'Healthy services',
        'system.error_rate': 'Error rate',

        'app.title': 'Vehicle access control',
        'common.back': 'Back',
        'users.status_active': 'Active',
        'users.status_blocked': 'Blocked',
        'movements.unknown': 'Unknown',
        'language.es': 'Spanish',
        'language.en': 'English',
        'common.store_corrupted': 'Stored data is damaged; no changes were applied',
        'system.last_error': 'Last error',
    },
}

DATE_FORMATS = {
    'es': '%d/%m/%Y',
    'en': '%m/%d/%Y',
}

WEEKDAY_KEYS = ('days.sun', 'days.mon', 'days.tue', 'days.wed', 'days.thu', 'days.fri', 'days.sat')


def translate(key, language='es', **kwargs):
    """Look up ``key`` for ``language``; unknown keys fall back to the key"""
    table = TRANSLATIONS.get(language) or TRANSLATIONS['es']
    text = table.get(key, key)
    return text.format(**kwargs) if kwargs else text


def current_language():
    """Language selected in the session, else the configured default"""
    language = session.get('language')
    if language in current_app.config['LANGUAGES']:
        return language
    return current_app.config['DEFAULT_LANGUAGE']


def t(key, **kwargs):
    """Translate ``key`` into the session language"""
    return translate(key, current_language(), **kwargs)


def date_format(language=None):
    """strftime pattern for short dates in ``language`` (session language by default)"""
    return DATE_FORMATS.get(language or current_language(), DATE_FORMATS['es'])
