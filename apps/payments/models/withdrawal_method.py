from django.db import models, transaction


class WithdrawalMethod(models.Model):
    """
    Payout method sellers can withdraw through.

    ``fields`` describes the inputs the method collects: a list of
    ``{fieldName, inputType, placeholder, isRequired}``.
    """
    INPUT_TYPES = ['String', 'Number', 'Date', 'Password', 'Email', 'Phone']

    method_name = models.CharField(max_length=100, unique=True)
    fields = models.JSONField(default=list)
    is_active = models.BooleanField(default=True)
    is_default = models.BooleanField(default=False, help_text="At most one method is the default")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'withdrawal_methods'
        ordering = ['-created_at']

    def __str__(self):
        return self.method_name

    def save(self, *args, **kwargs):
        """Saving a default method clears the flag on every other method"""
        with transaction.atomic():
            if self.is_default:
                WithdrawalMethod.objects.filter(is_default=True).exclude(pk=self.pk).update(is_default=False)
            super().save(*args, **kwargs)
