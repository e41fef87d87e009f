import uuid
from typing import Optional

from sqlalchemy import (
    String,
    Boolean,
    ForeignKey,
    Integer,
    Float,
    JSON,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from ..db import Base


def str_pk() -> Mapped[str]:
    return mapped_column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))


# Dates travel as ISO strings ("2024-05-25") exactly as clients send them.
# Columns listed in __json_fields__ hold JSON text; see services/normalization.py.


class UserProfile(Base):
    __tablename__ = "user_profiles"
    __json_fields__ = ("permissions",)

    id: Mapped[str] = str_pk()
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500))
    is_system: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    permissions: Mapped[Optional[str]] = mapped_column(Text)  # {"viewWorks": true, ...}


class User(Base):
    __tablename__ = "users"
    __json_fields__ = ()

    id: Mapped[str] = str_pk()
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), index=True)
    avatar: Mapped[Optional[str]] = mapped_column(String(1000))
    category: Mapped[Optional[str]] = mapped_column(String(50))  # INTERNAL|CLIENT|SUPPLIER
    role: Mapped[Optional[str]] = mapped_column(String(50))  # ADMIN|EDITOR|VIEWER
    profile_id: Mapped[Optional[str]] = mapped_column(String(64), ForeignKey("user_profiles.id", ondelete="SET NULL"))
    status: Mapped[Optional[str]] = mapped_column(String(20), default="ACTIVE")  # ACTIVE|PENDING|BLOCKED
    cpf: Mapped[Optional[str]] = mapped_column(String(20))
    address: Mapped[Optional[str]] = mapped_column(String(500))
    phone: Mapped[Optional[str]] = mapped_column(String(50))
    birth_date: Mapped[Optional[str]] = mapped_column(String(30))
    notes: Mapped[Optional[str]] = mapped_column(Text)
    must_change_password: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)


class ConstructionWork(Base):
    __tablename__ = "works"
    __json_fields__ = ("teamIds",)

    id: Mapped[str] = str_pk()
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    client: Mapped[Optional[str]] = mapped_column(String(255))
    client_id: Mapped[Optional[str]] = mapped_column(String(64))
    address: Mapped[Optional[str]] = mapped_column(String(500))
    status: Mapped[Optional[str]] = mapped_column(String(50))
    progress: Mapped[Optional[int]] = mapped_column(Integer, default=0)  # 0-100
    budget: Mapped[Optional[float]] = mapped_column(Float, default=0)
    start_date: Mapped[Optional[str]] = mapped_column(String(30))
    end_date: Mapped[Optional[str]] = mapped_column(String(30))
    image_url: Mapped[Optional[str]] = mapped_column(String(1000))
    description: Mapped[Optional[str]] = mapped_column(Text)
    team_ids: Mapped[Optional[str]] = mapped_column(Text)  # ["u1", "u2"]
    drive_link: Mapped[Optional[str]] = mapped_column(String(1000))


class Task(Base):
    __tablename__ = "tasks"
    __json_fields__ = ("images",)

    id: Mapped[str] = str_pk()
    work_id: Mapped[Optional[str]] = mapped_column(String(64), index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[Optional[str]] = mapped_column(String(100))
    priority: Mapped[Optional[str]] = mapped_column(String(20))
    assigned_to: Mapped[Optional[str]] = mapped_column(String(64))
    due_date: Mapped[Optional[str]] = mapped_column(String(30))
    completed_date: Mapped[Optional[str]] = mapped_column(String(30))
    images: Mapped[Optional[str]] = mapped_column(Text)  # ["https://...", ...]
    ai_analysis: Mapped[Optional[str]] = mapped_column(Text)


class TaskStatus(Base):
    __tablename__ = "task_statuses"
    __json_fields__ = ()

    id: Mapped[str] = str_pk()
    label: Mapped[str] = mapped_column(String(100), nullable=False)
    color_scheme: Mapped[Optional[str]] = mapped_column(String(20))  # gray|blue|orange|...
    order: Mapped[int] = mapped_column(Integer, default=0)


class FinanceCategory(Base):
    __tablename__ = "finance_categories"
    __json_fields__ = ()

    id: Mapped[str] = str_pk()
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[Optional[str]] = mapped_column(String(20))  # EXPENSE|INCOME|BOTH


class FinancialRecord(Base):
    __tablename__ = "financial_records"
    __json_fields__ = ()

    id: Mapped[str] = str_pk()
    work_id: Mapped[Optional[str]] = mapped_column(String(64), index=True)
    entity_id: Mapped[Optional[str]] = mapped_column(String(64))
    type: Mapped[Optional[str]] = mapped_column(String(20))
    description: Mapped[Optional[str]] = mapped_column(String(500))
    category: Mapped[Optional[str]] = mapped_column(String(100))
    amount: Mapped[Optional[float]] = mapped_column(Float, default=0)
    due_date: Mapped[Optional[str]] = mapped_column(String(30))
    paid_date: Mapped[Optional[str]] = mapped_column(String(30))
    status: Mapped[Optional[str]] = mapped_column(String(20))  # Pendente|Pago|Atrasado
    related_budget_category_id: Mapped[Optional[str]] = mapped_column(String(64))


class DailyLog(Base):
    __tablename__ = "daily_logs"
    __json_fields__ = ("images", "teamIds")

    id: Mapped[str] = str_pk()
    work_id: Mapped[Optional[str]] = mapped_column(String(64), index=True)
    author_id: Mapped[Optional[str]] = mapped_column(String(64))
    date: Mapped[Optional[str]] = mapped_column(String(30))
    content: Mapped[Optional[str]] = mapped_column(Text)
    images: Mapped[Optional[str]] = mapped_column(Text)
    type: Mapped[Optional[str]] = mapped_column(String(30))
    weather: Mapped[Optional[str]] = mapped_column(String(20))
    related_task_id: Mapped[Optional[str]] = mapped_column(String(64))
    team_ids: Mapped[Optional[str]] = mapped_column(Text)
    workforce: Mapped[Optional[dict]] = mapped_column(JSON)  # {"Pedreiro": 3, "Servente": 2}
    issue_category: Mapped[Optional[str]] = mapped_column(String(100))
    severity: Mapped[Optional[str]] = mapped_column(String(20))
    impacts: Mapped[Optional[list]] = mapped_column(JSON)
    action_plan: Mapped[Optional[str]] = mapped_column(Text)
    is_resolved: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    resolved_at: Mapped[Optional[str]] = mapped_column(String(30))
    resolved_by: Mapped[Optional[str]] = mapped_column(String(64))


class Material(Base):
    __tablename__ = "materials"
    __json_fields__ = ()

    id: Mapped[str] = str_pk()
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(100))
    unit: Mapped[Optional[str]] = mapped_column(String(30))
    brand: Mapped[Optional[str]] = mapped_column(String(100))
    price_estimate: Mapped[Optional[float]] = mapped_column(Float)
    description: Mapped[Optional[str]] = mapped_column(Text)


class MaterialOrder(Base):
    __tablename__ = "material_orders"
    __json_fields__ = ("quotes",)

    id: Mapped[str] = str_pk()
    work_id: Mapped[Optional[str]] = mapped_column(String(64), index=True)
    task_id: Mapped[Optional[str]] = mapped_column(String(64))
    requester_id: Mapped[Optional[str]] = mapped_column(String(64))
    supplier_id: Mapped[Optional[str]] = mapped_column(String(64))
    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[Optional[float]] = mapped_column(Float, default=0)
    unit: Mapped[Optional[str]] = mapped_column(String(30))
    status: Mapped[Optional[str]] = mapped_column(String(50))
    priority: Mapped[Optional[str]] = mapped_column(String(20))
    request_date: Mapped[Optional[str]] = mapped_column(String(30))
    purchase_date: Mapped[Optional[str]] = mapped_column(String(30))
    delivery_date: Mapped[Optional[str]] = mapped_column(String(30))
    estimated_cost: Mapped[Optional[float]] = mapped_column(Float)
    final_cost: Mapped[Optional[float]] = mapped_column(Float)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    quotes: Mapped[Optional[str]] = mapped_column(Text)  # [{"id", "supplierId", "price"}]
    selected_quote_id: Mapped[Optional[str]] = mapped_column(String(64))


class InventoryItem(Base):
    __tablename__ = "inventory_items"
    __json_fields__ = ()

    id: Mapped[str] = str_pk()
    asset_type: Mapped[Optional[str]] = mapped_column(String(20), default="EQUIPMENT")  # EQUIPMENT|REAL_ESTATE
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(100))
    image_url: Mapped[Optional[str]] = mapped_column(String(1000))
    notes: Mapped[Optional[str]] = mapped_column(Text)
    last_movement_date: Mapped[Optional[str]] = mapped_column(String(30))
    brand: Mapped[Optional[str]] = mapped_column(String(100))
    serial_number: Mapped[Optional[str]] = mapped_column(String(100))
    status: Mapped[Optional[str]] = mapped_column(String(50))
    current_work_id: Mapped[Optional[str]] = mapped_column(String(64))
    current_partner_id: Mapped[Optional[str]] = mapped_column(String(64))
    estimated_value: Mapped[Optional[float]] = mapped_column(Float)
    history: Mapped[Optional[list]] = mapped_column(JSON)  # movement entries
    development_name: Mapped[Optional[str]] = mapped_column(String(255))
    unit_number: Mapped[Optional[str]] = mapped_column(String(50))
    developer_name: Mapped[Optional[str]] = mapped_column(String(255))
    purchase_value: Mapped[Optional[float]] = mapped_column(Float)
    amount_paid: Mapped[Optional[float]] = mapped_column(Float)
    key_delivery_date: Mapped[Optional[str]] = mapped_column(String(30))
    document_link: Mapped[Optional[str]] = mapped_column(String(1000))


class RentalItem(Base):
    __tablename__ = "rental_items"
    __json_fields__ = ()

    id: Mapped[str] = str_pk()
    work_id: Mapped[Optional[str]] = mapped_column(String(64), index=True)
    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    supplier_id: Mapped[Optional[str]] = mapped_column(String(64))
    supplier_name: Mapped[Optional[str]] = mapped_column(String(255))
    quantity: Mapped[Optional[float]] = mapped_column(Float, default=0)
    unit: Mapped[Optional[str]] = mapped_column(String(30))
    unit_price: Mapped[Optional[float]] = mapped_column(Float, default=0)
    billing_period: Mapped[Optional[str]] = mapped_column(String(20))  # Diária|Semanal|Quinzenal|Mensal|Total
    start_date: Mapped[Optional[str]] = mapped_column(String(30))
    end_date: Mapped[Optional[str]] = mapped_column(String(30))
    return_date: Mapped[Optional[str]] = mapped_column(String(30))
    status: Mapped[Optional[str]] = mapped_column(String(30))
    notes: Mapped[Optional[str]] = mapped_column(Text)
