from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Profile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('job_id', models.UUIDField(db_index=True)),
                ('duration_ms', models.PositiveIntegerField()),
                ('memory_bytes', models.PositiveBigIntegerField()),
                ('compiler_version', models.CharField(max_length=255)),
                ('caller_client_name', models.CharField(blank=True, max_length=255, null=True)),
                ('caller_site_identifier', models.CharField(blank=True, max_length=255, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]
