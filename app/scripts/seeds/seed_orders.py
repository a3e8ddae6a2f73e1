"""Seed back-office users and a spread of random orders for local dashboards.

Usage:
    python app/scripts/seeds/seed_orders.py [ORDER_COUNT]
"""

import os
import random
import secrets
import sys
import uuid
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from pathlib import Path

project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from faker import Faker  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

import app.db.base  # noqa: E402, F401
from app.auth.models.user import User, UserRole  # noqa: E402
from app.core.money import quantize_money  # noqa: E402
from app.core.security import get_password_hash  # noqa: E402
from app.db.session import Base, SessionLocal, engine  # noqa: E402
from app.orders.models.order import Order, OrderStatus, PaymentMethod, PaymentStatus  # noqa: E402

fake = Faker()

# Payment status that plausibly goes with each order status
_PAYMENT_STATUSES = {
    OrderStatus.PENDING: [PaymentStatus.PENDING, PaymentStatus.FAILED],
    OrderStatus.CONFIRMED: [PaymentStatus.PAID, PaymentStatus.PENDING],
    OrderStatus.SHIPPED: [PaymentStatus.PAID, PaymentStatus.PENDING],
    OrderStatus.DELIVERED: [PaymentStatus.PAID],
    OrderStatus.CANCELED: [PaymentStatus.REFUNDED, PaymentStatus.FAILED, PaymentStatus.PENDING],
}


def seed_back_office_user(db: Session, email: str, name: str, role: UserRole) -> None:
    if db.query(User).filter(User.email == email).first():
        print(f"  User already exists: {email}")
        return

    password = os.environ.get(f"{role.value.upper()}_PASSWORD") or secrets.token_urlsafe(18)
    db.add(
        User(
            email=email,
            name=name,
            hashed_password=get_password_hash(password),
            role=role.value,
            is_active=True,
        )
    )
    db.commit()
    print(f"✓ {role.value} user created: {email} / {password}")


def build_random_order(now: datetime) -> Order:
    status = random.choices(list(OrderStatus), weights=[15, 20, 20, 35, 10])[0]
    method = random.choice(list(PaymentMethod))
    if method == PaymentMethod.COD and status != OrderStatus.DELIVERED:
        payment_status = PaymentStatus.PENDING
    else:
        payment_status = random.choice(_PAYMENT_STATUSES[status])

    subtotal = quantize_money(Decimal(random.randint(5_00, 2_000_00)) / 100)
    shipping_fee = random.choice([Decimal("0.00"), Decimal("15.00"), Decimal("30.00")])
    discount = quantize_money(subtotal * Decimal(random.choice([0, 0, 0, 5, 10, 20])) / 100)
    created_at = now - timedelta(minutes=random.randint(0, 400 * 24 * 60))

    return Order(
        id=uuid.uuid4(),
        order_number=f"ORD-{created_at.strftime('%Y%m%d')}-{uuid.uuid4().hex[:6].upper()}",
        status=status,
        payment_status=payment_status,
        payment_method=method,
        subtotal=subtotal,
        shipping_fee=shipping_fee,
        discount_amount=discount,
        final_total=subtotal + shipping_fee - discount,
        created_at=created_at,
        updated_at=created_at,
    )


def seed_orders(count: int) -> None:
    Base.metadata.create_all(engine)
    db = SessionLocal()
    try:
        staff_email = os.environ.get("STAFF_EMAIL", "staff@shop.example.com")
        admin_email = os.environ.get("ADMIN_EMAIL", "admin@shop.example.com")
        seed_back_office_user(db, staff_email, fake.name(), UserRole.STAFF)
        seed_back_office_user(db, admin_email, "Admin", UserRole.ADMIN)

        now = datetime.now(UTC)
        db.add_all(build_random_order(now) for _ in range(count))
        db.commit()
        print(f"✓ Seeded {count} orders")
    except Exception as e:
        print(f"✗ Error seeding orders: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_orders(int(sys.argv[1]) if len(sys.argv) > 1 else 500)
