from django.contrib import admin
from .models import DailyWin, Streak


@admin.register(DailyWin)
class DailyWinAdmin(admin.ModelAdmin):
    list_display = ['date', 'user', 'work_win', 'personal_win', 'growth_win']
    list_filter = ['date', 'user']
    search_fields = ['work_win', 'personal_win', 'growth_win', 'user__email']
    readonly_fields = ['date_created', 'date_modified']
    date_hierarchy = 'date'

    fieldsets = (
        ('Day', {
            'fields': ('user', 'date')
        }),
        ('Wins', {
            'fields': ('work_win', 'personal_win', 'growth_win')
        }),
        ('Timestamps', {
            'fields': ('date_created', 'date_modified'),
            'classes': ('collapse',)
        }),
    )


@admin.register(Streak)
class StreakAdmin(admin.ModelAdmin):
    list_display = ['user', 'current_streak', 'longest_streak', 'last_entry_date']
    search_fields = ['user__email']
    readonly_fields = ['date_modified']
