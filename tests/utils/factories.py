import uuid
from datetime import UTC, datetime
from decimal import Decimal

from faker import Faker
from sqlalchemy.orm import Session

from app.auth.models.user import User
from app.core.security import get_password_hash
from app.orders.models.order import Order, OrderStatus, PaymentMethod, PaymentStatus

fake = Faker()


def create_user_factory(
    db_session: Session,
    email: str | None = None,
    password: str = "testpass123",
    name: str | None = None,
    role: str = "customer",
    is_active: bool = True,
) -> User:
    """
    Factory function to create test users.

    Args:
        db_session: Database session
        email: User email (generates random if None)
        password: Plain text password
        name: User name (generates random if None)
        role: User role ("customer", "staff" or "admin")
        is_active: Whether user is active

    Returns:
        Created User instance
    """
    user = User(
        id=uuid.uuid4(),
        email=email or fake.email(),
        hashed_password=get_password_hash(password),
        name=name or fake.name(),
        role=role,
        is_active=is_active,
        created_at=datetime.now(UTC),
        updated_at=datetime.now(UTC),
    )

    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)

    return user


def create_order_factory(
    db_session: Session,
    created_at: datetime,
    final_total: Decimal | str = "100.00",
    status: OrderStatus = OrderStatus.CONFIRMED,
    payment_status: PaymentStatus = PaymentStatus.PAID,
    payment_method: PaymentMethod = PaymentMethod.CREDIT_CARD,
    shipping_fee: Decimal | str = "0.00",
    discount_amount: Decimal | str = "0.00",
) -> Order:
    """Create an order; ``subtotal`` is derived so the totals stay consistent."""
    final_total = Decimal(final_total)
    shipping_fee = Decimal(shipping_fee)
    discount_amount = Decimal(discount_amount)

    order = Order(
        id=uuid.uuid4(),
        order_number=f"ORD-{created_at.strftime('%Y%m%d')}-{uuid.uuid4().hex[:6].upper()}",
        status=status,
        payment_status=payment_status,
        payment_method=payment_method,
        subtotal=final_total - shipping_fee + discount_amount,
        shipping_fee=shipping_fee,
        discount_amount=discount_amount,
        final_total=final_total,
        created_at=created_at,
        updated_at=created_at,
    )
    db_session.add(order)
    db_session.flush()
    return order
