import sys
import os
import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from retail.domain import Book, Clothing, Electronics, DISCOUNT_RATES
from retail.order import Order
from retail.report import order_summary, discounts_by_category
from retail.service import OrderProcessor
from app.cli import build_demo_order


# ============ Данные ============
@st.cache_resource
def get_catalog():
    return tuple(build_demo_order().products) + (
        Book("Book2", "35.0", 420),
        Electronics("Electronics2", "1200.0", 512),
        Clothing("Clothing2", "80.0", "Large"),
    )


@st.cache_resource
def get_processor():
    return OrderProcessor()


def new_order(order_number: int) -> Order:
    """Новый заказ сессии, уведомления складываются в session_state"""
    order = Order(order_number)
    order.subscribe(st.session_state.notifications.append)
    return order


def format_price(value) -> str:
    return f"{value:.2f}"


# ============ Инициализация ============
st.set_page_config(
    page_title="Retail Orders",
    page_icon="🛒",
    layout="wide",
)

catalog = get_catalog()
processor = get_processor()

if "notifications" not in st.session_state:
    st.session_state.notifications = []

if "order_number" not in st.session_state:
    st.session_state.order_number = 1

if "order" not in st.session_state:
    st.session_state.order = new_order(st.session_state.order_number)

order: Order = st.session_state.order

st.title("🛒 Заказы и скидки")

# ============ SIDEBAR ============
with st.sidebar:
    st.header("🏷️ Скидки по категориям")
    for category, rate in DISCOUNT_RATES.items():
        st.write(f"**{category}**: {rate * 100:.0f}%")

    st.divider()
    guarded = st.toggle("Охраняемая обработка", value=True)
    if st.button("🆕 Новый заказ", width="stretch"):
        st.session_state.order_number += 1
        st.session_state.order = new_order(st.session_state.order_number)
        st.rerun()

# ============ КАТАЛОГ ============
st.header("🏪 Каталог")
for index, product in enumerate(catalog):
    cols = st.columns([4, 2, 2, 2])
    with cols[0]:
        st.markdown(f"**{product.name}**")
        st.caption(product.category)
    with cols[1]:
        st.write(format_price(product.price))
    with cols[2]:
        st.write(f"-{format_price(product.compute_discount())}")
    with cols[3]:
        if st.button("➕ В заказ", key=f"add_{index}", disabled=order.is_processed):
            order.add_product(product)
            st.rerun()

st.divider()

# ============ ЗАКАЗ ============
summary = order_summary(order)
st.header(f"🧾 Заказ #{summary['order_number']} ({summary['status']})")

# результат обработки переживает st.rerun()
flash = st.session_state.pop("flash", None)
if flash is not None:
    kind, text = flash
    if kind == "error":
        st.error(f"❌ {text}")
    else:
        st.success(text)

if not summary["items"]:
    st.info("Заказ пуст. Добавьте товары из каталога")
else:
    st.dataframe(
        [
            {
                "Товар": line["name"],
                "Категория": line["category"],
                "Стоимость": format_price(line["cost"]),
                "Скидка": format_price(line["discount"]),
            }
            for line in summary["items"]
        ],
        width="stretch",
    )

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("💰 До скидок", format_price(summary["gross_total"]))
    with col2:
        st.metric("🏷️ Скидка", format_price(summary["total_discount"]))
    with col3:
        st.metric("🧾 total_cost", format_price(summary["total_cost"]))

    st.bar_chart(
        {k: float(v) for k, v in discounts_by_category(order).items()}
    )

    if st.button(
        "✅ Обработать заказ", key="process", type="primary", width="stretch"
    ):
        if guarded:
            result = processor.try_process(order)
            if result.is_left:
                st.session_state.flash = ("error", result.error())
            else:
                st.session_state.flash = ("success", "Заказ обработан")
        else:
            processor.process(order)
            st.session_state.flash = ("success", "Заказ обработан")
        # сводка и кнопки выше уже отрисованы по старому состоянию
        st.rerun()

# ============ УВЕДОМЛЕНИЯ ============
st.divider()
st.subheader("🔔 Уведомления")
if st.session_state.notifications:
    for message in st.session_state.notifications:
        st.write(f"Notification: {message}")
else:
    st.caption("Уведомлений пока нет")
