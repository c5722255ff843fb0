from django_widgets import Widget, register


@register("currency-switcher")
class CurrencySwitcherWidget(Widget):
    template_name = "widgets/currency_switcher.html"

    def setup(self, currency: str = "EUR") -> None:
        self.add_parameter("currency", currency)
