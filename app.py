from flask import Flask, render_template, redirect, url_for, request, flash, jsonify, abort
from flask_login import LoginManager, login_required, current_user
from flask_wtf.csrf import CSRFProtect
from flask_talisman import Talisman
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from dotenv import load_dotenv
from sqlalchemy.exc import SQLAlchemyError
from datetime import datetime, timedelta
from functools import wraps
import os
import logging

from models import db, AppUser, Product
from forms import (LoginForm, SignupForm, GoogleSignInForm, AddToCartForm, UpdateCartForm,
                   ProductForm)
from identity import AuthError, bcrypt
from backend import init_backend, get_resolver
from cart import Cart, CartError
import catalog

# Load environment variables
load_dotenv()

app = Flask(__name__)
app.config.from_object(os.getenv('STOREFRONT_CONFIG', 'config.Config'))

# Logging
logging.basicConfig(filename=app.config.get('LOG_FILE'), level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize Extensions
init_backend(app)
bcrypt.init_app(app)
csrf = CSRFProtect(app)
login_manager = LoginManager(app)
login_manager.login_view = 'login'
login_manager.login_message_category = 'info'
login_manager.session_protection = 'strong'  # Protect against session hijacking

# Content Security Policy (CSP)
csp = {
    'default-src': '\'self\'',
    'script-src': ['\'self\'', '\'unsafe-inline\'', 'https://www.gstatic.com',
                   'https://apis.google.com'],  # Firebase web SDK for Google popup
    'style-src': ['\'self\'', '\'unsafe-inline\'', 'https://fonts.googleapis.com'],
    'font-src': ['\'self\'', 'https://fonts.gstatic.com'],
    'img-src': ['\'self\'', 'data:', 'https://placehold.co', 'https://lh3.googleusercontent.com'],
    'connect-src': ['\'self\'', 'https://*.googleapis.com'],
    'frame-src': ['https://*.firebaseapp.com', 'https://accounts.google.com'],
}

# Talisman for HTTP Headers (HSTS, XSS, Frame Options)
talisman = Talisman(
    app,
    content_security_policy=csp,
    force_https=app.config['FORCE_HTTPS'],
    strict_transport_security=True,
    session_cookie_secure=app.config['SESSION_COOKIE_SECURE'],
    frame_options='DENY'  # Prevent Clickjacking
)

# Rate Limiting
limiter = Limiter(
    get_remote_address,
    app=app,
    default_limits=["200 per day", "50 per hour"],
    storage_uri="memory://"
)


@login_manager.user_loader
def load_user(user_id):
    return get_resolver().load_user(user_id)


@app.context_processor
def inject_store_context():
    return {
        'cart_count': Cart().count(),
        'auth_provider': app.config['AUTH_PROVIDER'],
        'firebase_web_config': {
            'apiKey': app.config.get('FIREBASE_API_KEY'),
            'authDomain': app.config.get('FIREBASE_AUTH_DOMAIN'),
            'projectId': app.config.get('FIREBASE_PROJECT_ID'),
        },
    }


def admin_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not current_user.is_authenticated:
            return redirect(url_for('admin_login'))
        if not current_user.is_admin:
            logger.warning(f"Access denied to {request.path} for user: {current_user.email} from {request.remote_addr}")
            flash('Access Denied.', 'danger')
            return redirect(url_for('index'))
        return view(*args, **kwargs)
    return wrapped


def _safe_next(default):
    target = request.args.get('next')
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return default


def _is_bot(form):
    # Honeypot check
    if form.is_submitted() and form.honeypot.data:
        logger.warning(f"Bot detected via honeypot from {request.remote_addr}")
        return True
    return False


# --- Storefront ---

@app.route('/')
def index():
    products = catalog.featured_products(app.config['FEATURED_PRODUCT_COUNT'])
    return render_template('index.html', products=products)


@app.route('/products')
def products():
    q = request.args.get('q', '').strip()
    category = request.args.get('category', '').strip() or None
    name = request.args.get('name', '').strip() or None
    if q:
        product_list = catalog.search_products(q, category=category)
    else:
        product_list = catalog.list_products(name_prefix=name, category=category)
    return render_template('products.html', products=product_list, q=q, category=category,
                           categories=catalog.list_categories())


@app.route('/products/<product_id>')
def product_detail(product_id):
    product = catalog.get_product(product_id)
    if product is None:
        abort(404)
    related = catalog.get_related_products(product, app.config['RELATED_PRODUCT_COUNT'])
    return render_template('product_detail.html', product=product, related=related,
                           form=AddToCartForm())


# --- API for Products ---

@app.route('/api/products')
def api_products():
    q = request.args.get('q', '').strip()
    category = request.args.get('category', '').strip() or None
    if q:
        product_list = catalog.search_products(q, category=category)
    else:
        product_list = catalog.list_products(name_prefix=request.args.get('name') or None, category=category)
    return jsonify([p.to_dict() for p in product_list])


@app.route('/api/products/<product_id>')
def api_product(product_id):
    product = catalog.get_product(product_id)
    if product is None:
        return jsonify({'error': 'product not found'}), 404
    return jsonify(product.to_dict())


# --- Cart ---

@app.route('/cart')
def view_cart():
    cart = Cart()
    return render_template('cart.html', lines=cart.lines(), total=cart.total(),
                           update_form=UpdateCartForm())


@app.route('/cart/add/<product_id>', methods=['POST'])
def cart_add(product_id):
    product = catalog.get_product(product_id)
    if product is None:
        abort(404)
    form = AddToCartForm()
    if form.validate_on_submit():
        try:
            Cart().add(product, form.quantity.data)
        except CartError as e:
            flash(str(e), 'danger')
        else:
            flash(f'Added {form.quantity.data} x {product.name} to your cart.', 'success')
    else:
        for errors in form.errors.values():
            flash(errors[0], 'danger')
    return redirect(_safe_next(url_for('product_detail', product_id=product.id)))


@app.route('/cart/update/<product_id>', methods=['POST'])
def cart_update(product_id):
    form = UpdateCartForm()
    if form.validate_on_submit():
        Cart().update(product_id, form.quantity.data)
    else:
        for errors in form.errors.values():
            flash(errors[0], 'danger')
    return redirect(url_for('view_cart'))


@app.route('/cart/remove/<product_id>', methods=['POST'])
def cart_remove(product_id):
    Cart().remove(product_id)
    return redirect(url_for('view_cart'))


@app.route('/cart/clear', methods=['POST'])
def cart_clear():
    Cart().clear()
    return redirect(url_for('view_cart'))


# --- Accounts ---

@app.route('/login', methods=['GET', 'POST'])
@limiter.limit("5 per minute")
def login():
    if current_user.is_authenticated:
        return redirect(url_for('index'))

    form = LoginForm()
    if _is_bot(form):
        return redirect(url_for('index'))  # Silent fail for bots

    if form.validate_on_submit():
        try:
            get_resolver().login(form.email.data, form.password.data)
        except AuthError as e:
            logger.warning(f"Failed login attempt for user: {form.email.data} from {request.remote_addr} ({e.code})")
            flash(e.message or 'Failed to login. Please check your credentials.', 'danger')
        else:
            logger.info(f"Successful login for user: {form.email.data}")
            flash('Logged in successfully!', 'success')
            return redirect(_safe_next(url_for('index')))

    return render_template('login.html', form=form, google_form=GoogleSignInForm())


@app.route('/login/google', methods=['POST'])
@limiter.limit("5 per minute")
def login_google():
    form = GoogleSignInForm()
    if not form.validate_on_submit():
        flash('Failed to sign in with Google. Please try again.', 'danger')
        return redirect(url_for('login'))
    try:
        user = get_resolver().sign_in_with_google(form.id_token.data)
    except AuthError as e:
        logger.warning(f"Failed Google sign-in from {request.remote_addr} ({e.code})")
        flash(e.message or 'Failed to sign in with Google. Please try again.', 'danger')
        return redirect(url_for('login'))
    logger.info(f"Successful Google sign-in for user: {user.email}")
    return redirect(url_for('index'))


@app.route('/signup', methods=['GET', 'POST'])
@limiter.limit("5 per minute")
def signup():
    if current_user.is_authenticated:
        return redirect(url_for('index'))

    form = SignupForm()
    if _is_bot(form):
        return redirect(url_for('index'))

    if form.validate_on_submit():
        try:
            get_resolver().signup(form.email.data, form.password.data,
                                  display_name=form.display_name.data or None)
        except AuthError as e:
            logger.warning(f"Failed signup for {form.email.data} from {request.remote_addr} ({e.code})")
            flash(e.message or 'Failed to create an account. Please try again.', 'danger')
        else:
            logger.info(f"New signup: {form.email.data}")
            flash('Account created!', 'success')
            return redirect(url_for('index'))

    return render_template('signup.html', form=form, google_form=GoogleSignInForm())


@app.route('/logout')
@login_required
def logout():
    get_resolver().logout()
    return redirect(url_for('index'))


@app.route('/profile')
@login_required
def profile():
    return render_template('profile.html', user=current_user)


# --- Admin ---

@app.route('/admin/login', methods=['GET', 'POST'])
@limiter.limit("5 per minute")
def admin_login():
    if current_user.is_authenticated and current_user.is_admin:
        return redirect(url_for('admin_dashboard'))

    form = LoginForm()
    error = None
    if current_user.is_authenticated:
        error = 'Access Denied. You are not an admin.'

    if _is_bot(form):
        return redirect(url_for('index'))

    if form.validate_on_submit():
        try:
            user = get_resolver().login(form.email.data, form.password.data)
        except AuthError as e:
            logger.warning(f"Failed admin login attempt for user: {form.email.data} from {request.remote_addr} ({e.code})")
            error = e.message or 'Failed to login. Please check your credentials or ensure you are an admin.'
        else:
            if user.is_admin:
                logger.info(f"Successful admin login for user: {user.email}")
                return redirect(url_for('admin_dashboard'))
            logger.warning(f"Non-admin {user.email} signed in through admin login from {request.remote_addr}")
            error = 'Access Denied. You are not an admin.'

    return render_template('admin/login.html', form=form, error=error)


@app.route('/admin/logout')
@login_required
def admin_logout():
    get_resolver().logout()
    return redirect(url_for('admin_login'))


@app.route('/admin')
@admin_required
def admin():
    return redirect(url_for('admin_dashboard'))


@app.route('/admin/dashboard')
@admin_required
def admin_dashboard():
    stats = None
    try:
        stats = {
            'total_users': AppUser.query.count(),
            'recent_signups': AppUser.query.filter(
                AppUser.created_at >= datetime.utcnow() - timedelta(days=7)).count(),
            'total_products': Product.query.count(),
        }
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error computing dashboard stats")
    return render_template('admin/dashboard.html', stats=stats)


@app.route('/admin/users')
@admin_required
def admin_users():
    try:
        users = AppUser.query.order_by(AppUser.email.asc()).all()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Error fetching users")
        return render_template('admin/users.html', users=[], error=f'Failed to fetch users. {e}')
    return render_template('admin/users.html', users=users, error=None)


@app.route('/admin/products')
@admin_required
def admin_products():
    return render_template('admin/products.html', products=catalog.list_products())


@app.route('/admin/products/new', methods=['GET', 'POST'])
@admin_required
def admin_product_new():
    form = ProductForm()
    if form.validate_on_submit():
        try:
            product = catalog.create_product(**form.product_fields())
        except SQLAlchemyError:
            logger.exception("Error creating product")
            flash('Failed to create product. Please try again.', 'danger')
        else:
            flash(f'Product "{product.name}" created.', 'success')
            return redirect(url_for('admin_products'))
    return render_template('admin/product_form.html', form=form)


# --- Error Handlers ---

@app.errorhandler(404)
def page_not_found(e):
    return render_template('404.html'), 404


@app.errorhandler(500)
def internal_server_error(e):
    db.session.rollback()
    return "<h1>500 - Internal Server Error</h1>", 500


@app.cli.command('create-db')
def create_db():
    """Create the store tables."""
    db.create_all()
    print('Database tables created.')


if __name__ == '__main__':
    with app.app_context():
        db.create_all()
    # In production, debug must be False
    app.run(debug=False, ssl_context='adhoc')  # Enable adhoc SSL for local dev to test Secure cookies
