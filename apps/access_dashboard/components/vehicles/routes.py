"""
Vehicles Routes
Registry page, form actions, CSV export and JSON listing
"""
from flask import (Blueprint, Response, current_app, flash, jsonify, redirect,
                   render_template, request, url_for)

from access_dashboard.core.auth import login_required
from access_dashboard.core.camera import decode_data_url
from access_dashboard.core.errors import CameraError, StoreCorruptedError, VehicleValidationError
from access_dashboard.core.i18n import t

from .service import VEHICLE_TYPES

vehicles_bp = Blueprint('vehicles', __name__)


def _service():
    return current_app.extensions['vehicles']


def _face_photo_from_form():
    """Camera frames arrive as a data URL in a hidden field"""
    face_photo = (request.form.get('face_photo') or '').strip()
    if not face_photo:
        return None
    try:
        decode_data_url(face_photo)
    except CameraError:
        return None
    return face_photo


@vehicles_bp.route('/dashboard/vehicles')
@login_required
def vehicles_page():
    """Vehicle registry page"""
    query = request.args.get('q', '')
    mode = request.args.get('mode', 'manual')
    if mode not in ('manual', 'auto'):
        mode = 'manual'

    editing = None
    edit_id = request.args.get('edit', type=int)
    if edit_id is not None:
        editing = _service().get(edit_id)

    return render_template(
        'vehicles.html',
        vehicles=_service().search(query),
        total=len(_service().list_vehicles()),
        query=query,
        mode=mode,
        editing=editing,
        vehicle_types=VEHICLE_TYPES,
        plate_api_configured=bool(current_app.config['PLATE_API_KEY']),
    )


@vehicles_bp.route('/dashboard/vehicles', methods=['POST'])
@login_required
def register_vehicle():
    """Register a vehicle from the manual or automatic form"""
    mode = request.form.get('mode', 'manual')
    try:
        _service().register(
            request.form.get('name', ''),
            request.form.get('plate', ''),
            request.form.get('type', 'carro'),
            face_photo=_face_photo_from_form(),
        )
    except StoreCorruptedError:
        flash(t('common.store_corrupted'), 'error')
        return redirect(url_for('vehicles.vehicles_page', mode=mode))
    except VehicleValidationError as e:
        flash(t(e.code), 'error')
        return render_template(
            'vehicles.html',
            vehicles=_service().list_vehicles(),
            total=len(_service().list_vehicles()),
            query='',
            mode=mode,
            editing=None,
            form=request.form,
            vehicle_types=VEHICLE_TYPES,
            plate_api_configured=bool(current_app.config['PLATE_API_KEY']),
        ), 400

    key = 'vehicles.vehicle_registered_auto' if mode == 'auto' else 'vehicles.vehicle_registered'
    flash(t(key), 'success')
    return redirect(url_for('vehicles.vehicles_page', mode=mode))


@vehicles_bp.route('/dashboard/vehicles/<int:vehicle_id>/edit', methods=['POST'])
@login_required
def update_vehicle(vehicle_id):
    try:
        _service().update(
            vehicle_id,
            request.form.get('name', ''),
            request.form.get('plate', ''),
            request.form.get('type', 'carro'),
            face_photo=_face_photo_from_form(),
        )
    except VehicleValidationError as e:
        flash(t(e.code), 'error')
        return redirect(url_for('vehicles.vehicles_page', edit=vehicle_id))
    except StoreCorruptedError:
        flash(t('common.store_corrupted'), 'error')
        return redirect(url_for('vehicles.vehicles_page'))

    flash(t('vehicles.vehicle_updated'), 'success')
    return redirect(url_for('vehicles.vehicles_page'))


@vehicles_bp.route('/dashboard/vehicles/<int:vehicle_id>/delete', methods=['POST'])
@login_required
def delete_vehicle(vehicle_id):
    try:
        _service().delete(vehicle_id)
    except VehicleValidationError as e:
        flash(t(e.code), 'error')
    except StoreCorruptedError:
        flash(t('common.store_corrupted'), 'error')
    else:
        flash(t('vehicles.vehicle_deleted'), 'success')
    return redirect(url_for('vehicles.vehicles_page'))


@vehicles_bp.route('/dashboard/vehicles/clear', methods=['POST'])
@login_required
def clear_vehicles():
    try:
        _service().clear()
    except StoreCorruptedError:
        flash(t('common.store_corrupted'), 'error')
    else:
        flash(t('vehicles.list_cleared'), 'success')
    return redirect(url_for('vehicles.vehicles_page'))


@vehicles_bp.route('/dashboard/vehicles/export.csv')
@login_required
def export_vehicles():
    """Download the registry as vehicles.csv"""
    try:
        csv_text = _service().export_csv()
    except VehicleValidationError as e:
        flash(t(e.code), 'error')
        return redirect(url_for('vehicles.vehicles_page'))

    return Response(
        csv_text,
        mimetype='text/csv',
        headers={'Content-Disposition': 'attachment; filename=vehicles.csv'},
    )


@vehicles_bp.route('/api/vehicles')
@login_required
def api_vehicles():
    """Get registered vehicles, optionally filtered with ?q="""
    vehicles = _service().search(request.args.get('q', ''))
    return jsonify({'vehicles': vehicles, 'total': len(vehicles)})
