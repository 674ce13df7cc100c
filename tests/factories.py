"""
Test factories for creating test data using factory_boy.
"""
import factory
from factory.django import DjangoModelFactory
from factory import Faker, SubFactory, LazyAttribute
from datetime import timedelta
from decimal import Decimal
from django.contrib.auth import get_user_model
from django.utils import timezone

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Factory for back-office staff accounts."""

    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f"staff{n}")
    email = LazyAttribute(lambda obj: f"{obj.username}@example.com")
    first_name = Faker('first_name')
    last_name = Faker('last_name')
    phone = factory.Sequence(lambda n: f"900000{n:04d}")
    is_active = True
    is_staff = True


class CustomerFactory(DjangoModelFactory):
    class Meta:
        model = 'users.Customer'

    first_name = Faker('first_name')
    last_name = Faker('last_name')
    phone_number = factory.Sequence(lambda n: f"800000{n:04d}")
    email = factory.Sequence(lambda n: f"customer{n}@example.com")


class SellerFactory(DjangoModelFactory):
    class Meta:
        model = 'users.Seller'

    first_name = Faker('first_name')
    last_name = Faker('last_name')
    shop_name = factory.Sequence(lambda n: f"Shop {n}")
    phone_number = factory.Sequence(lambda n: f"700000{n:04d}")
    email = factory.Sequence(lambda n: f"seller{n}@example.com")
    status = 'Approved'


def _address_block():
    return {
        'contactPersonName': 'Asha Rao',
        'phone': '9876543210',
        'addressType': 'Permanent',
        'country': 'India',
        'city': 'Pune',
        'zipCode': '411001',
        'address': '12 MG Road',
        'note': '',
    }


class CustomerAddressFactory(DjangoModelFactory):
    class Meta:
        model = 'users.CustomerAddress'

    customer = SubFactory(CustomerFactory)
    billing_address = factory.LazyFunction(_address_block)
    shipping_address = factory.LazyFunction(_address_block)


class CategoryFactory(DjangoModelFactory):
    class Meta:
        model = 'products.Category'

    name = factory.Sequence(lambda n: f"Category {n}")
    priority = factory.Sequence(lambda n: n)
    logo = factory.Sequence(
        lambda n: f"https://res.cloudinary.com/demo/image/upload/v1700000000/categories/logo{n}.png"
    )
    status = 'Active'


class SubCategoryFactory(DjangoModelFactory):
    class Meta:
        model = 'products.SubCategory'

    name = factory.Sequence(lambda n: f"Sub category {n}")
    category = SubFactory(CategoryFactory)


class SubSubCategoryFactory(DjangoModelFactory):
    class Meta:
        model = 'products.SubSubCategory'

    name = factory.Sequence(lambda n: f"Sub sub category {n}")
    sub_category = SubFactory(SubCategoryFactory)
    category = LazyAttribute(lambda obj: obj.sub_category.category)


class BrandFactory(DjangoModelFactory):
    class Meta:
        model = 'products.Brand'

    name = factory.Sequence(lambda n: f"Brand {n}")
    logo = factory.Sequence(
        lambda n: f"https://res.cloudinary.com/demo/image/upload/v1700000000/brands/brand{n}.png"
    )
    status = 'Active'


class ProductFactory(DjangoModelFactory):
    class Meta:
        model = 'products.Product'

    seller = SubFactory(SellerFactory)
    title = factory.Sequence(lambda n: f"Product {n}")
    description = Faker('sentence')
    category = SubFactory(CategoryFactory)
    sku = factory.Sequence(lambda n: f"SKU-{n:05d}")
    unit_price = Decimal('100.00')
    current_stock_qty = 50


class OrderFactory(DjangoModelFactory):
    class Meta:
        model = 'orders.Order'

    customer = SubFactory(CustomerFactory)
    seller = SubFactory(SellerFactory)
    customer_address = SubFactory(CustomerAddressFactory, customer=factory.SelfAttribute('..customer'))
    total = Decimal('200.00')
    payment_method = 'COD'


class OrderItemFactory(DjangoModelFactory):
    class Meta:
        model = 'orders.OrderItem'

    order = SubFactory(OrderFactory)
    product = SubFactory(ProductFactory, seller=factory.SelfAttribute('..order.seller'))
    quantity = 2
    unit_price = Decimal('100.00')
    tax = Decimal('0')
    item_discount = Decimal('0')
    total_price = Decimal('200.00')


class CouponFactory(DjangoModelFactory):
    class Meta:
        model = 'promotions.Coupon'

    coupon_type = 'discountOnPurchase'
    title = factory.Sequence(lambda n: f"Coupon {n}")
    code = factory.Sequence(lambda n: f"SAVE{n:04d}")
    creator_type = 'admin'
    creator_id = 1
    discount_type = 'amount'
    discount_amount = Decimal('50.00')
    start_date = factory.LazyFunction(lambda: timezone.now() + timedelta(days=1))
    expire_date = factory.LazyFunction(lambda: timezone.now() + timedelta(days=10))


class FlashDealFactory(DjangoModelFactory):
    class Meta:
        model = 'promotions.FlashDeal'

    title = factory.Sequence(lambda n: f"Flash deal {n}")
    start_date = factory.LazyFunction(timezone.now)
    end_date = factory.LazyFunction(lambda: timezone.now() + timedelta(days=3))
    banner_image = 'https://res.cloudinary.com/demo/image/upload/v1700000000/flash-deals/banner.png'
    banner_public_id = 'flash-deals/banner'
    is_published = True


class DealOfTheDayFactory(DjangoModelFactory):
    class Meta:
        model = 'promotions.DealOfTheDay'

    title = factory.Sequence(lambda n: f"Deal {n}")
    product = SubFactory(ProductFactory)


class DeviceTokenFactory(DjangoModelFactory):
    class Meta:
        model = 'notifications.DeviceToken'

    token = factory.Sequence(lambda n: f"device-token-{n}")


class WithdrawalMethodFactory(DjangoModelFactory):
    class Meta:
        model = 'payments.WithdrawalMethod'

    method_name = factory.Sequence(lambda n: f"Method {n}")
    fields = factory.LazyFunction(lambda: [
        {'fieldName': 'Account Number', 'inputType': 'Number', 'placeholder': '', 'isRequired': True},
    ])


def create_order_with_items(item_count=2, **order_kwargs):
    """Create an order with ``item_count`` lines and a matching total."""
    order = OrderFactory(**order_kwargs)
    items = [OrderItemFactory(order=order) for _ in range(item_count)]
    order.total = sum((item.total_price for item in items), Decimal('0'))
    order.save(update_fields=['total'])
    return order
