# backend/database/demo_data.py
"""Demo data for local runs: a client, an employee, two farmers, products and orders."""

import logging

from sqlalchemy.orm import Session

from database.session import SessionLocal, init_db
from models import User, Product, Order, OrderProduct

logger = logging.getLogger(__name__)


def create_demo_data(db: Session) -> bool:
    """Seed the database; returns False when users already exist."""
    if db.query(User).first():
        logger.info("Demo data already present")
        return False

    client = User(name="Mario", surname="Rossi", email="mario.rossi@example.com", role="CLIENT")
    employee = User(name="Giulia", surname="Bianchi", email="giulia.bianchi@example.com", role="EMPLOYEE")
    anna = User(name="Anna", surname="Verdi", email="anna@farm.example.com", role="FARMER")
    bruno = User(name="Bruno", surname="Neri", email="bruno@farm.example.com", role="FARMER")
    db.add_all([client, employee, anna, bruno])
    db.flush()

    apples = Product(producer_id=anna.id, name="Apples", type="FRUIT", unit_of_measure="kg",
                     quantity=50, price=2.5, description="Golden delicious")
    pears = Product(producer_id=anna.id, name="Pears", type="FRUIT", unit_of_measure="kg",
                    quantity=20, price=3.0)
    eggs = Product(producer_id=bruno.id, name="Eggs", type="DAIRY", unit_of_measure="unit",
                   quantity=120, price=0.4)
    db.add_all([apples, pears, eggs])
    db.flush()

    first = Order(client_id=client.id, employee_id=employee.id, status="CREATED")
    second = Order(client_id=client.id, employee_id=employee.id, status="PENDING CANCELATION")
    db.add_all([first, second])
    db.flush()

    lines = [
        (first, apples, 2), (first, pears, 1), (first, eggs, 6),
        (second, apples, 3),
    ]
    for order, product, amount in lines:
        db.add(OrderProduct(order_id=order.id, product_id=product.id, user_id=product.producer_id,
                            amount=amount, price=product.price))
        product.quantity -= amount

    db.commit()
    logger.info(f"Demo data created: 4 users, 3 products, {len(lines)} line items")
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    session = SessionLocal()
    try:
        create_demo_data(session)
    finally:
        session.close()
