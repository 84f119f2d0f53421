import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('amount', models.DecimalField(decimal_places=2, help_text='Negative for debits', max_digits=20)),
                ('transaction_type', models.CharField(choices=[('ACTIVATION', 'Activation'), ('UPGRADE', 'Upgrade'), ('ADMIN_FEE', 'Admin Fee'), ('REFERRAL_COMMISSION', 'Referral Commission')], max_length=20)),
                ('level', models.PositiveSmallIntegerField(help_text='Account level that was bought')),
                ('generation', models.PositiveSmallIntegerField(blank=True, help_text='Upline position (1 = direct referrer)', null=True)),
                ('description', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('source_user', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='generated_transactions', to=settings.AUTH_USER_MODEL)),
                ('user', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='transactions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('-created_at', '-id'),
            },
        ),
    ]
